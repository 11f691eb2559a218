"""Filesystem asset store adapter."""

import os
import tempfile
from pathlib import Path

from ..core.errors import NotFoundError
from ..core.models import AssetTuple
from ..ports.hash import HashPort
from ..ports.store import AssetStorePort
from .store_paths import asset_path, normalize_filename


class FsAssetStore(AssetStorePort):
    """Content-addressed store laid out under a root directory."""

    def __init__(self, root: Path, hasher: HashPort, base_url: str = "/assets"):
        self.root = root
        self.hasher = hasher
        self.base_url = base_url.rstrip("/")

    def _object_path(self, filename: str, hash: str, variant: str) -> Path:
        return self.root / asset_path(filename, hash, variant)

    def set_from_string(self, content: bytes, filename: str) -> AssetTuple | None:
        result = AssetTuple(
            filename=normalize_filename(filename),
            hash=self.hasher.sha1(content),
        )
        path = self._object_path(result.filename, result.hash, result.variant)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return result

    def exists(self, filename: str, hash: str, variant: str = "") -> bool:
        return self._object_path(filename, hash, variant).is_file()

    def get_as_url(self, filename: str, hash: str, variant: str = "") -> str:
        return f"{self.base_url}/{asset_path(filename, hash, variant)}"

    def get_as_string(self, filename: str, hash: str, variant: str = "") -> bytes:
        path = self._object_path(filename, hash, variant)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"Asset not found: {filename} ({hash})") from None

    def delete(self, filename: str, hash: str, variant: str = "") -> None:
        self._object_path(filename, hash, variant).unlink(missing_ok=True)
