"""Domain models for health logs."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

LOG_DATE_FORMAT = "%Y-%m-%d"
_LOG_DATE_LENGTH = 10

PREDEFINED_TAGS: tuple[str, ...] = (
    "Tired",
    "Dizzy",
    "Headache",
    "Nausea",
    "Anxiety",
    "Joint Pain",
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogRecord:
    """A dated health entry as supplied by storage."""

    id: UUID
    log_date: str
    tags: tuple[str, ...] = ()
    symptoms: str = ""
    notes: str = ""
    created_at: datetime | None = None

    @property
    def calendar_date(self) -> date | None:
        """Return the parsed log date, or None when it is malformed."""
        return parse_log_date(self.log_date)


def parse_log_date(raw: object) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` string into a date."""
    if not isinstance(raw, str) or len(raw) != _LOG_DATE_LENGTH:
        return None
    if not raw.isascii() or not raw.replace("-", "", 2).isdigit():
        return None
    try:
        return datetime.strptime(raw, LOG_DATE_FORMAT).date()
    except ValueError:
        return None


def dated_records(logs: Iterable[LogRecord]) -> Iterator[tuple[LogRecord, date]]:
    """Yield each record with its parsed date, skipping malformed ones."""
    for log in logs:
        parsed = log.calendar_date
        if parsed is None:
            _logger.warning(
                "Skipping log with malformed date: id=%s log_date=%r",
                log.id,
                log.log_date,
            )
            continue
        yield log, parsed
