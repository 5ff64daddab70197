"""Month calendar grid construction and navigation."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from health_journal.domain.calendar import CalendarCell, CalendarMonth, MonthCursor
from health_journal.domain.logs import LogRecord, dated_records
from health_journal.services.logs import HealthLogRepository

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def build_grid(
    cursor: MonthCursor, log_dates: Iterable[date], today: date
) -> list[CalendarCell]:
    """Build a Sunday-first grid of day cells for the cursor's month.

    Leading padding cells align the 1st with its weekday column and trailing
    padding completes the final week. ``has_entry`` is a membership test, so
    several logs on the same day mark a single cell.
    """
    marked = set(log_dates)
    # date.weekday() is Monday=0; shift so Sunday is column 0.
    leading = (cursor.first_day.weekday() + 1) % DAYS_PER_WEEK
    cells = [CalendarCell(day=None) for _ in range(leading)]
    for day in range(1, cursor.days_in_month + 1):
        current = date(cursor.year, cursor.month, day)
        cells.append(
            CalendarCell(
                day=day,
                has_entry=current in marked,
                is_today=current == today,
            )
        )
    trailing = -len(cells) % DAYS_PER_WEEK
    cells.extend(CalendarCell(day=None) for _ in range(trailing))
    return cells


def advance_month(cursor: MonthCursor, delta: int) -> MonthCursor:
    """Return the cursor ``delta`` months away from ``cursor``."""
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise TypeError(f"Month delta must be an integer, got {delta!r}")
    index = cursor.year * MONTHS_PER_YEAR + (cursor.month - 1) + delta
    year, month_index = divmod(index, MONTHS_PER_YEAR)
    return MonthCursor(year=year, month=month_index + 1)


def date_clicked(cursor: MonthCursor, day: int | None) -> date | None:
    """Resolve a clicked cell to a date; padding cells resolve to None."""
    if day is None:
        return None
    if not 1 <= day <= cursor.days_in_month:
        raise ValueError(f"Day {day} is outside {cursor.label}")
    return date(cursor.year, cursor.month, day)


def collect_log_dates(logs: Iterable[LogRecord]) -> set[date]:
    """Return the set of calendar dates that have at least one log."""
    return {parsed for _, parsed in dated_records(logs)}


@dataclass
class CalendarService:
    """Service that renders a user's month calendar."""

    repository: HealthLogRepository

    def get_month(
        self, user_id: UUID, cursor: MonthCursor, today: date
    ) -> CalendarMonth:
        """Fetch the month's logs and build its grid."""
        logs = self.repository.list_logs_between(
            user_id, cursor.first_day, cursor.last_day
        )
        cells = build_grid(cursor, collect_log_dates(logs), today)
        return CalendarMonth(
            cursor=cursor,
            cells=cells,
            previous=_neighbour(cursor, -1),
            next=_neighbour(cursor, 1),
        )


def weekday_names() -> list[str]:
    """Return abbreviated weekday headers, Sunday first."""
    names = list(calendar.day_abbr)
    return names[-1:] + names[:-1]


def _neighbour(cursor: MonthCursor, delta: int) -> MonthCursor | None:
    # None past the first or last representable month.
    try:
        return advance_month(cursor, delta)
    except ValueError:
        return None
