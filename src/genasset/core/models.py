"""Core domain models."""

import json
from dataclasses import dataclass
from typing import Any

from .errors import CacheEntryDecodeError

CACHE_FORMAT_VERSION = 1


@dataclass(frozen=True)
class AssetTuple:
    """Location of a stored artifact within an asset store."""

    filename: str
    hash: str
    variant: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"Filename": self.filename, "Hash": self.hash, "Variant": self.variant}

    def to_cache_value(self) -> bytes:
        """Encode for storage in a cache entry."""
        payload = {
            "v": CACHE_FORMAT_VERSION,
            "filename": self.filename,
            "hash": self.hash,
            "variant": self.variant,
        }
        return json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")

    @classmethod
    def from_cache_value(cls, data: bytes, filename: str = "") -> "AssetTuple":
        """Decode a cache entry written by ``to_cache_value``.

        Args:
            data: Raw cache value
            filename: Logical filename being resolved, used in error messages

        Raises:
            CacheEntryDecodeError: If the entry is malformed or from an unknown format version
        """
        try:
            payload: Any = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise CacheEntryDecodeError(
                filename, f'Unreadable cache entry for "{filename}": {e}'
            ) from e

        if not isinstance(payload, dict) or payload.get("v") != CACHE_FORMAT_VERSION:
            raise CacheEntryDecodeError(
                filename, f'Unsupported cache entry format for "{filename}"'
            )

        try:
            return cls(
                filename=str(payload["filename"]),
                hash=str(payload["hash"]),
                variant=str(payload.get("variant") or ""),
            )
        except KeyError as e:
            raise CacheEntryDecodeError(
                filename, f'Cache entry for "{filename}" is missing field {e}'
            ) from e
