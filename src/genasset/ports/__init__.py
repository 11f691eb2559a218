"""Port interfaces for genasset."""

from .cache import CachePort
from .clock import ClockPort
from .hash import HashPort
from .logger import LoggerPort
from .metrics import MetricsPort
from .store import AssetStorePort

__all__ = [
    "AssetStorePort",
    "CachePort",
    "ClockPort",
    "HashPort",
    "LoggerPort",
    "MetricsPort",
]
