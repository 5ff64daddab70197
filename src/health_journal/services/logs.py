"""Health log service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from health_journal.domain.logs import LogRecord


class HealthLogRepository(Protocol):
    """Persistence interface for health logs."""

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        log_date: date,
        symptoms: str,
        notes: str,
        tags: list[str],
    ) -> LogRecord:
        """Create a health log and return it."""

    def list_recent_logs(self, user_id: UUID, limit: int) -> list[LogRecord]:
        """Return the most recently created logs, newest first."""

    def list_logs_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[LogRecord]:
        """Return logs dated within ``start``..``end`` inclusive, oldest first."""

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a log and return whether it existed."""


@dataclass
class HealthLogService:
    """Service for recording and browsing health logs."""

    repository: HealthLogRepository
    recent_limit: int = 20

    def add_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        log_date: date,
        symptoms: str = "",
        notes: str = "",
        tags: list[str] | None = None,
    ) -> LogRecord:
        """Validate and persist a new log entry."""
        cleaned_tags = normalize_tags(tags or [])
        symptoms = symptoms.strip()
        notes = notes.strip()
        if not symptoms and not notes and not cleaned_tags:
            raise ValueError("A log needs symptoms, notes or at least one tag")
        return self.repository.create_log(
            user_id,
            log_date=log_date,
            symptoms=symptoms,
            notes=notes,
            tags=cleaned_tags,
        )

    def list_recent(self, user_id: UUID, limit: int | None = None) -> list[LogRecord]:
        """Return recent logs for the dashboard."""
        return self.repository.list_recent_logs(user_id, limit or self.recent_limit)

    def list_for_day(self, user_id: UUID, day: date) -> list[LogRecord]:
        """Return logs recorded for a single calendar day."""
        return self.repository.list_logs_between(user_id, day, day)

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a log owned by the user."""
        return self.repository.delete_log(user_id, log_id)


def normalize_tags(tags: list[str]) -> list[str]:
    """Strip tags and drop blanks and duplicates, keeping order."""
    seen: dict[str, None] = {}
    for tag in tags:
        cleaned = tag.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)
