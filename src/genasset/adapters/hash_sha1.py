"""SHA1 hashing adapter."""

import hashlib

from ..ports.hash import HashPort


class Sha1Adapter(HashPort):
    """SHA1 implementation using hashlib."""

    def sha1(self, data: bytes) -> str:
        return hashlib.sha1(data).hexdigest()
