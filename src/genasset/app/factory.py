"""Wiring of adapters into a GeneratedAssetHandler."""

from pathlib import Path

from ..adapters import (
    FsAssetStore,
    FsCacheAdapter,
    LoggingMetricsAdapter,
    MemoryAssetStore,
    MemoryCacheAdapter,
    NoopMetricsAdapter,
    Sha1Adapter,
    StdLoggerAdapter,
    UtcClockAdapter,
)
from ..core import GenAssetConfig, GeneratedAssetHandler
from ..ports import AssetStorePort, CachePort, ClockPort, HashPort, LoggerPort, MetricsPort


def create_cache(config: GenAssetConfig, clock: ClockPort) -> CachePort:
    if config.cache_backend == "filesystem":
        return FsCacheAdapter(Path(config.cache_dir), config.cache_namespace, clock)
    if config.cache_backend == "memory":
        return MemoryCacheAdapter(config.cache_namespace, clock)
    raise ValueError(f"Unknown cache backend: {config.cache_backend}")


def create_store(config: GenAssetConfig, hasher: HashPort) -> AssetStorePort:
    if config.store_backend == "filesystem":
        return FsAssetStore(Path(config.store_root), hasher, base_url=config.base_url)
    if config.store_backend == "memory":
        return MemoryAssetStore(hasher, base_url=config.base_url)
    if config.store_backend == "s3":
        if not config.s3_bucket:
            raise ValueError("GA_S3_BUCKET is required for the s3 store backend")
        from ..adapters.store_s3 import S3AssetStore

        return S3AssetStore(
            config.s3_bucket,
            hasher,
            prefix=config.s3_prefix,
            base_url=config.s3_public_url,
            endpoint_url=config.endpoint_url,
            region=config.region,
            profile=config.profile,
        )
    raise ValueError(f"Unknown store backend: {config.store_backend}")


def create_metrics(config: GenAssetConfig, logger: LoggerPort) -> MetricsPort:
    if config.metrics_type == "noop":
        return NoopMetricsAdapter()
    if config.metrics_type == "logging":
        return LoggingMetricsAdapter(logger)
    raise ValueError(f"Unknown metrics backend: {config.metrics_type}")


def create_handler(config: GenAssetConfig | None = None) -> GeneratedAssetHandler:
    """Create handler with wired adapters.

    Args:
        config: Configuration to use. If None, reads from the environment.
    """
    if config is None:
        config = GenAssetConfig.from_env()

    clock = UtcClockAdapter()
    hasher = Sha1Adapter()
    logger = StdLoggerAdapter(level=config.log_level)

    return GeneratedAssetHandler(
        store=create_store(config, hasher),
        cache=create_cache(config, clock),
        logger=logger,
        metrics=create_metrics(config, logger),
        lifetime=config.lifetime,
    )
