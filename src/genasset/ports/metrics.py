"""Metrics port interface."""

from typing import Protocol


class MetricsPort(Protocol):
    """Port for metrics collection."""

    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        ...
