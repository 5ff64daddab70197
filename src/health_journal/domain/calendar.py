"""Domain models for the month calendar."""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

DECEMBER = 12


@dataclass(frozen=True)
class MonthCursor:
    """The year and month currently displayed."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"Year out of range: {self.year}")
        if not 1 <= self.month <= DECEMBER:
            raise ValueError(f"Month out of range: {self.month}")

    @classmethod
    def containing(cls, day: date) -> "MonthCursor":
        """Return the cursor for the month containing a date."""
        return cls(year=day.year, month=day.month)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    @property
    def label(self) -> str:
        """Human readable month label, e.g. ``February 2024``."""
        return f"{calendar.month_name[self.month]} {self.year}"


@dataclass(frozen=True)
class CalendarCell:
    """One cell of the month grid; ``day`` is None for padding."""

    day: int | None
    has_entry: bool = False
    is_today: bool = False

    @property
    def is_padding(self) -> bool:
        return self.day is None


@dataclass(frozen=True)
class CalendarMonth:
    """A rendered month with its navigation neighbours."""

    cursor: MonthCursor
    cells: list[CalendarCell]
    previous: MonthCursor | None
    next: MonthCursor | None

    @property
    def label(self) -> str:
        return self.cursor.label
