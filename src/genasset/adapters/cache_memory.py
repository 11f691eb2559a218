"""In-memory cache adapter."""

from ..ports.cache import CachePort
from ..ports.clock import ClockPort


class MemoryCacheAdapter(CachePort):
    """Process-local cache keyed by namespace.

    Several adapters may share one ``backend`` dict; each only sees and
    cleans the entries under its own namespace.
    """

    def __init__(
        self,
        namespace: str,
        clock: ClockPort,
        backend: dict[str, tuple[bytes, float]] | None = None,
    ):
        self.namespace = namespace
        self.clock = clock
        self.lifetime = 0
        self._entries = backend if backend is not None else {}

    def set_lifetime(self, seconds: int) -> None:
        if seconds < 0:
            raise ValueError(f"Cache lifetime must be >= 0, got {seconds}")
        self.lifetime = seconds

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def load(self, key: str) -> bytes | None:
        full_key = self._full_key(key)
        entry = self._entries.get(full_key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at and self.clock.now().timestamp() >= expires_at:
            del self._entries[full_key]
            return None
        return value

    def save(self, key: str, value: bytes) -> bool:
        expires_at = 0.0
        if self.lifetime:
            expires_at = self.clock.now().timestamp() + self.lifetime
        self._entries[self._full_key(key)] = (value, expires_at)
        return True

    def clean(self) -> None:
        prefix = f"{self.namespace}:"
        for full_key in [k for k in self._entries if k.startswith(prefix)]:
            del self._entries[full_key]
