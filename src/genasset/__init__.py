"""genasset - Cache-fronted references to generated file artifacts."""

try:
    from ._version import version as __version__
except ImportError:
    # Package is not installed, so version is not available
    __version__ = "0.0.0+unknown"

from .core import (
    ArtifactInconsistentError,
    AssetTuple,
    GeneratedAssetHandler,
    GenAssetConfig,
)
from .app.factory import create_handler

__all__ = [
    "ArtifactInconsistentError",
    "AssetTuple",
    "GenAssetConfig",
    "GeneratedAssetHandler",
    "create_handler",
]
