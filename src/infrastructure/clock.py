"""Clock adapters."""

from datetime import datetime
from zoneinfo import ZoneInfo

from src.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the wall-clock time in a fixed timezone."""

    def __init__(self, timezone: str = "UTC") -> None:
        self._zone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._zone)


class FixedClock(ClockPort):
    """Clock frozen at a given instant, used by tests and replays."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


__all__ = ["SystemClock", "FixedClock"]
