"""Asset store port interface."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.models import AssetTuple


class AssetStorePort(Protocol):
    """Port for a content-addressable asset store."""

    def set_from_string(self, content: bytes, filename: str) -> "AssetTuple | None":
        """Store content under filename and return its tuple."""
        ...

    def exists(self, filename: str, hash: str, variant: str = "") -> bool:
        """Check whether a stored object exists for the tuple."""
        ...

    def get_as_url(self, filename: str, hash: str, variant: str = "") -> str:
        """Get a retrieval URL for the tuple."""
        ...

    def get_as_string(self, filename: str, hash: str, variant: str = "") -> bytes:
        """Get stored content for the tuple."""
        ...

    def delete(self, filename: str, hash: str, variant: str = "") -> None:
        """Remove stored object for the tuple."""
        ...
