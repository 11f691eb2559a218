"""Cache key derivation."""

import hashlib
from typing import Any


def _entropy_bytes(entropy: Any) -> bytes:
    if isinstance(entropy, bytes):
        return entropy
    if entropy is True:
        return b"1"
    return str(entropy).encode("utf-8")


def cache_key(filename: str, entropy: Any = None) -> str:
    """Derive the cache key for a generated asset.

    The key is ``sha1(filename)``, suffixed with ``_`` and ``sha1(entropy)``
    when entropy is set, so variants of one file are cached independently.
    Falsy values and the string ``"0"`` count as no entropy.
    """
    key = hashlib.sha1(filename.encode("utf-8")).hexdigest()
    if entropy and entropy != "0":
        key += "_" + hashlib.sha1(_entropy_bytes(entropy)).hexdigest()
    return key
