"""In-memory asset store adapter."""

from ..core.errors import NotFoundError
from ..core.models import AssetTuple
from ..ports.hash import HashPort
from ..ports.store import AssetStorePort
from .store_paths import asset_path, normalize_filename


class MemoryAssetStore(AssetStorePort):
    """Content-addressed store held in a dict."""

    def __init__(self, hasher: HashPort, base_url: str = "/assets"):
        self.hasher = hasher
        self.base_url = base_url.rstrip("/")
        self._objects: dict[tuple[str, str, str], bytes] = {}

    def set_from_string(self, content: bytes, filename: str) -> AssetTuple | None:
        result = AssetTuple(
            filename=normalize_filename(filename),
            hash=self.hasher.sha1(content),
        )
        self._objects[(result.filename, result.hash, result.variant)] = content
        return result

    def exists(self, filename: str, hash: str, variant: str = "") -> bool:
        return (filename, hash, variant) in self._objects

    def get_as_url(self, filename: str, hash: str, variant: str = "") -> str:
        return f"{self.base_url}/{asset_path(filename, hash, variant)}"

    def get_as_string(self, filename: str, hash: str, variant: str = "") -> bytes:
        try:
            return self._objects[(filename, hash, variant)]
        except KeyError:
            raise NotFoundError(f"Asset not found: {filename} ({hash})") from None

    def delete(self, filename: str, hash: str, variant: str = "") -> None:
        self._objects.pop((filename, hash, variant), None)
