"""Core GeneratedAssetHandler orchestration."""

from collections.abc import Callable
from typing import Any

from ..ports import AssetStorePort, CachePort, LoggerPort, MetricsPort
from .errors import ArtifactInconsistentError
from .keys import cache_key
from .models import AssetTuple

RegenerateCallback = Callable[[], bytes]


class GeneratedAssetHandler:
    """Handle references to generated files via cached tuples.

    Lookups go through the cache first. A cached tuple is only returned after
    the asset store confirms it still exists; a miss is regenerated through the
    caller's callback when one is supplied. Concurrent misses for the same key
    may regenerate twice, the last write wins.
    """

    def __init__(
        self,
        store: AssetStorePort,
        cache: CachePort,
        logger: LoggerPort,
        metrics: MetricsPort,
        lifetime: int = 0,
    ):
        """Initialize handler with ports.

        Args:
            lifetime: Cache entry lifetime in seconds, 0 = never expire.
        """
        self._store = store
        self.cache = cache
        self.logger = logger
        self.metrics = metrics
        self.cache.set_lifetime(lifetime)

    @property
    def asset_store(self) -> AssetStorePort:
        return self._store

    def set_asset_store(self, store: AssetStorePort) -> "GeneratedAssetHandler":
        """Assign the asset backend."""
        self._store = store
        return self

    def flush(self) -> None:
        """Clear every cached tuple owned by this handler."""
        self.cache.clean()
        self.logger.info("Flushed generated asset cache")
        self.metrics.increment("genasset.flush")

    def get_generated_url(
        self,
        filename: str,
        entropy: Any = None,
        regenerate: RegenerateCallback | None = None,
    ) -> str | None:
        """Get a URL for the generated file, or None if unavailable."""
        result = self._resolve(filename, entropy, regenerate)
        if result is None:
            return None
        return self._store.get_as_url(result.filename, result.hash, result.variant)

    def get_generated_content(
        self,
        filename: str,
        entropy: Any = None,
        regenerate: RegenerateCallback | None = None,
    ) -> bytes | None:
        """Get content of the generated file, or None if unavailable."""
        result = self._resolve(filename, entropy, regenerate)
        if result is None:
            return None
        return self._store.get_as_string(result.filename, result.hash, result.variant)

    def update_content(self, filename: str, entropy: Any, content: bytes) -> AssetTuple:
        """Store new content for the file and cache its tuple.

        Raises:
            ArtifactInconsistentError: If the store does not hold the written tuple
        """
        key = cache_key(filename, entropy)

        result = self._store.set_from_string(content, filename)
        if result is not None:
            self.cache.save(key, result.to_cache_value())
            self.logger.info(
                "Stored generated asset",
                filename=filename,
                hash=result.hash,
                variant=result.variant,
                size=len(content),
            )

        return self._validate(result, filename)

    def _resolve(
        self,
        filename: str,
        entropy: Any = None,
        regenerate: RegenerateCallback | None = None,
    ) -> AssetTuple | None:
        """Generate or return the tuple for the given file.

        Returns None when nothing is cached and no callback was given.
        Exceptions raised by ``regenerate`` propagate unchanged.
        """
        key = cache_key(filename, entropy)
        data = self.cache.load(key)
        if data:
            self.logger.debug("Generated asset cache hit", filename=filename, key=key)
            self.metrics.increment("genasset.cache.hit")
            result = AssetTuple.from_cache_value(data, filename)
            return self._validate(result, filename)

        self.metrics.increment("genasset.cache.miss")
        if regenerate is None:
            self.logger.debug("Generated asset unavailable", filename=filename, key=key)
            return None

        self.logger.info("Regenerating asset", filename=filename, key=key)
        self.metrics.increment("genasset.regenerate")
        content = regenerate()
        return self.update_content(filename, entropy, content)

    def _validate(self, result: AssetTuple | None, filename: str) -> AssetTuple:
        if result is not None and self._store.exists(
            result.filename, result.hash, result.variant
        ):
            return result

        self.logger.warning("Generated asset missing from store", filename=filename)
        self.metrics.increment("genasset.inconsistent")
        raise ArtifactInconsistentError(filename)
