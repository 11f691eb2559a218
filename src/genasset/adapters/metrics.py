"""Metrics adapters."""

from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort


class NoopMetricsAdapter(MetricsPort):
    """Discards all metrics."""

    def increment(self, name: str, value: int = 1) -> None:
        pass


class LoggingMetricsAdapter(MetricsPort):
    """Reports counters through the logger at debug level."""

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    def increment(self, name: str, value: int = 1) -> None:
        self.logger.debug("metric", name=name, value=value)
