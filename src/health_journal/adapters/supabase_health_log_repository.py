"""Supabase repository for health logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from health_journal.domain.logs import LogRecord
from health_journal.services.logs import HealthLogRepository

_COLUMNS = "id, log_date, symptoms, notes, tags, created_at"


@dataclass
class SupabaseHealthLogRepository(HealthLogRepository):
    """Supabase implementation for the health_logs table."""

    client: Client

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        log_date: date,
        symptoms: str,
        notes: str,
        tags: list[str],
    ) -> LogRecord:
        """Insert a health log row and return it."""
        response = (
            self.client.table("health_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "log_date": log_date.isoformat(),
                    "symptoms": symptoms,
                    "notes": notes,
                    "tags": tags,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create health log")
        return _parse_row(response.data[0])

    def list_recent_logs(self, user_id: UUID, limit: int) -> list[LogRecord]:
        """Return the user's most recently created logs."""
        response = (
            self.client.table("health_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_logs_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[LogRecord]:
        """Return logs dated within the inclusive range."""
        response = (
            self.client.table("health_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat())
            .order("log_date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a log owned by the user."""
        response = (
            self.client.table("health_logs")
            .delete()
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> LogRecord:
    raw_tags = row.get("tags")
    tags = tuple(str(tag) for tag in raw_tags) if isinstance(raw_tags, list) else ()
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return LogRecord(
        id=UUID(str(row["id"])),
        log_date=str(row.get("log_date") or ""),
        tags=tags,
        symptoms=str(row.get("symptoms") or ""),
        notes=str(row.get("notes") or ""),
        created_at=created_at,
    )
