"""Clock abstraction supplying the current local date."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Interface for reading the current date."""

    def today(self) -> date:
        """Return the current calendar date."""


@dataclass
class SystemClock(Clock):
    """Clock reading the system time in a fixed timezone."""

    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()
