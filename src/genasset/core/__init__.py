"""Core domain logic."""

from .config import GenAssetConfig
from .errors import (
    ArtifactInconsistentError,
    CacheEntryDecodeError,
    GenAssetError,
    NotFoundError,
)
from .keys import cache_key
from .models import AssetTuple
from .service import GeneratedAssetHandler

__all__ = [
    "ArtifactInconsistentError",
    "AssetTuple",
    "CacheEntryDecodeError",
    "GenAssetConfig",
    "GenAssetError",
    "GeneratedAssetHandler",
    "NotFoundError",
    "cache_key",
]
