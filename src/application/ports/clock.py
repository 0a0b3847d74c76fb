"""Port for reading the current time."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing the current wall-clock time."""

    def now(self) -> datetime:
        """Return the current time in the configured timezone."""


__all__ = ["ClockPort"]
