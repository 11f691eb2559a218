"""UTC clock adapter."""

from datetime import UTC, datetime

from ..ports.clock import ClockPort


class UtcClockAdapter(ClockPort):
    """UTC clock implementation."""

    def now(self) -> datetime:
        return datetime.now(UTC)
