"""Cache port interface."""

from typing import Protocol


class CachePort(Protocol):
    """Port for a namespaced key-value cache with a flat lifetime."""

    lifetime: int

    def set_lifetime(self, seconds: int) -> None:
        """Set lifetime for entries saved from now on (0 = never expire)."""
        ...

    def load(self, key: str) -> bytes | None:
        """Return cached value, or None if absent or expired."""
        ...

    def save(self, key: str, value: bytes) -> bool:
        """Store value under key, overwriting any previous entry."""
        ...

    def clean(self) -> None:
        """Remove every entry in this cache's namespace."""
        ...
