from datetime import UTC, datetime, timedelta

import pytest

from genasset.adapters import MemoryAssetStore, MemoryCacheAdapter, NoopMetricsAdapter, Sha1Adapter
from genasset.core import GeneratedAssetHandler


class FakeClock:
    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)

    def now(self):
        return self.current

    def advance(self, seconds):
        self.current += timedelta(seconds=seconds)


class RecordingLogger:
    def __init__(self):
        self.records = []

    def debug(self, message, **kwargs):
        self.records.append(("debug", message, kwargs))

    def info(self, message, **kwargs):
        self.records.append(("info", message, kwargs))

    def warning(self, message, **kwargs):
        self.records.append(("warning", message, kwargs))

    def error(self, message, **kwargs):
        self.records.append(("error", message, kwargs))


class CountingStore(MemoryAssetStore):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.writes = 0

    def set_from_string(self, content, filename):
        self.writes += 1
        return super().set_from_string(content, filename)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return CountingStore(Sha1Adapter())


@pytest.fixture
def cache(clock):
    return MemoryCacheAdapter("GeneratedAssetHandler", clock)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def handler(store, cache, logger):
    return GeneratedAssetHandler(store, cache, logger, NoopMetricsAdapter())
