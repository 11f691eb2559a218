"""Core domain errors."""


class GenAssetError(Exception):
    """Base error for generated asset handling."""


class NotFoundError(GenAssetError):
    """Stored object not found."""


class ArtifactInconsistentError(GenAssetError):
    """A tuple was resolved but the asset store does not hold it."""

    def __init__(self, filename: str, message: str | None = None):
        self.filename = filename
        super().__init__(message or f'Error regenerating file "{filename}"')


class CacheEntryDecodeError(ArtifactInconsistentError):
    """A cache entry could not be decoded into a tuple."""
