"""Hash port interface."""

from typing import Protocol


class HashPort(Protocol):
    """Port for content hashing."""

    def sha1(self, data: bytes) -> str:
        """Compute SHA1 hex digest of data."""
        ...
