"""Filesystem cache adapter."""

import os
import re
import shutil
import tempfile
from pathlib import Path

from ..ports.cache import CachePort
from ..ports.clock import ClockPort

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_]+$")


class FsCacheAdapter(CachePort):
    """Cache stored as one file per key under ``base_dir/namespace``.

    Each entry file starts with a header line holding the absolute expiry
    as epoch seconds (0 = never), followed by the raw value.
    """

    def __init__(self, base_dir: Path, namespace: str, clock: ClockPort):
        if not _SAFE_KEY.match(namespace):
            raise ValueError(f"Invalid cache namespace: {namespace!r}")
        self.base_dir = base_dir
        self.namespace = namespace
        self.clock = clock
        self.lifetime = 0

    @property
    def namespace_dir(self) -> Path:
        return self.base_dir / self.namespace

    def set_lifetime(self, seconds: int) -> None:
        if seconds < 0:
            raise ValueError(f"Cache lifetime must be >= 0, got {seconds}")
        self.lifetime = seconds

    def _entry_path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid cache key: {key!r}")
        return self.namespace_dir / key

    def load(self, key: str) -> bytes | None:
        path = self._entry_path(key)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None

        header, sep, value = raw.partition(b"\n")
        try:
            expires_at = int(header)
        except ValueError:
            expires_at = -1
        if not sep or expires_at < 0:
            # Torn or foreign file
            path.unlink(missing_ok=True)
            return None

        if expires_at and self.clock.now().timestamp() >= expires_at:
            path.unlink(missing_ok=True)
            return None
        return value

    def save(self, key: str, value: bytes) -> bool:
        path = self._entry_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        expires_at = 0
        if self.lifetime:
            expires_at = int(self.clock.now().timestamp()) + self.lifetime

        try:
            self._write(path, b"%d\n" % expires_at, value)
        except FileNotFoundError:
            # Namespace directory removed by a concurrent clean()
            path.parent.mkdir(parents=True, exist_ok=True)
            self._write(path, b"%d\n" % expires_at, value)
        return True

    def _write(self, path: Path, header: bytes, value: bytes) -> None:
        # Write atomically so concurrent readers never see a partial entry
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(header)
                f.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def clean(self) -> None:
        if self.namespace_dir.exists():
            shutil.rmtree(self.namespace_dir)
