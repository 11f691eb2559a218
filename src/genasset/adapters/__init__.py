"""Adapters for genasset ports."""

from .cache_fs import FsCacheAdapter
from .cache_memory import MemoryCacheAdapter
from .clock_utc import UtcClockAdapter
from .hash_sha1 import Sha1Adapter
from .logger_std import StdLoggerAdapter
from .metrics import LoggingMetricsAdapter, NoopMetricsAdapter
from .store_fs import FsAssetStore
from .store_memory import MemoryAssetStore

__all__ = [
    "FsAssetStore",
    "FsCacheAdapter",
    "LoggingMetricsAdapter",
    "MemoryAssetStore",
    "MemoryCacheAdapter",
    "NoopMetricsAdapter",
    "Sha1Adapter",
    "StdLoggerAdapter",
    "UtcClockAdapter",
]
