"""Centralized configuration for genasset."""

import os
from dataclasses import dataclass, field


@dataclass(slots=True)
class GenAssetConfig:
    """All genasset configuration in one place.

    Environment variables (all optional):
        GA_LIFETIME:        Cache entry lifetime in seconds, 0 = never expire. Default 0.
        GA_LOG_LEVEL:       Logging level. Default "INFO".
        GA_CACHE_BACKEND:   "filesystem" (default) or "memory".
        GA_CACHE_DIR:       Base directory for the filesystem cache.
        GA_CACHE_NAMESPACE: Namespace flushed as a whole. Default "GeneratedAssetHandler".
        GA_STORE_BACKEND:   "filesystem" (default), "memory" or "s3".
        GA_STORE_ROOT:      Root directory for the filesystem asset store.
        GA_BASE_URL:        Public URL prefix for stored assets. Default "/assets".
        GA_S3_BUCKET:       Bucket for the S3 asset store.
        GA_S3_PREFIX:       Key prefix inside the bucket. Default "".
        GA_S3_PUBLIC_URL:   Public URL prefix for the bucket; presigned URLs when unset.
        GA_METRICS:         Metrics backend: "noop" or "logging" (default).
    """

    lifetime: int = 0
    log_level: str = "INFO"
    cache_backend: str = "filesystem"
    cache_dir: str = "/tmp/.genasset/cache"
    cache_namespace: str = "GeneratedAssetHandler"
    store_backend: str = "filesystem"
    store_root: str = "/tmp/.genasset/assets"
    base_url: str = "/assets"
    s3_bucket: str | None = None
    s3_prefix: str = ""
    s3_public_url: str | None = None
    metrics_type: str = "logging"

    # Connection params (typically passed by CLI, not env vars)
    endpoint_url: str | None = field(default=None, repr=False)
    region: str | None = None
    profile: str | None = None

    def __post_init__(self) -> None:
        if self.lifetime < 0:
            raise ValueError(f"Cache lifetime must be >= 0, got {self.lifetime}")

    @classmethod
    def from_env(
        cls,
        *,
        log_level: str = "INFO",
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
    ) -> "GenAssetConfig":
        """Build config from environment variables + explicit overrides."""
        return cls(
            lifetime=int(os.environ.get("GA_LIFETIME", "0")),
            log_level=os.environ.get("GA_LOG_LEVEL", log_level),
            cache_backend=os.environ.get("GA_CACHE_BACKEND", "filesystem"),
            cache_dir=os.environ.get("GA_CACHE_DIR", "/tmp/.genasset/cache"),
            cache_namespace=os.environ.get("GA_CACHE_NAMESPACE", "GeneratedAssetHandler"),
            store_backend=os.environ.get("GA_STORE_BACKEND", "filesystem"),
            store_root=os.environ.get("GA_STORE_ROOT", "/tmp/.genasset/assets"),
            base_url=os.environ.get("GA_BASE_URL", "/assets"),
            s3_bucket=os.environ.get("GA_S3_BUCKET") or None,
            s3_prefix=os.environ.get("GA_S3_PREFIX", ""),
            s3_public_url=os.environ.get("GA_S3_PUBLIC_URL") or None,
            metrics_type=os.environ.get("GA_METRICS", "logging"),
            endpoint_url=endpoint_url,
            region=region,
            profile=profile,
        )
