"""Pydantic models for API requests and responses."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from health_journal.domain.calendar import CalendarCell, CalendarMonth, MonthCursor
from health_journal.domain.chat import ChatMessage
from health_journal.domain.logs import LogRecord
from health_journal.domain.summary import SummaryStats


class LogCreateRequest(BaseModel):
    """Payload for creating a health log."""

    symptoms: str = ""
    notes: str = ""
    tags: list[str] = Field(default_factory=list)
    log_date: date | None = None


class LogResponse(BaseModel):
    """Serialized health log."""

    id: UUID
    log_date: str
    symptoms: str
    notes: str
    tags: list[str]
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, record: LogRecord) -> "LogResponse":
        return cls(
            id=record.id,
            log_date=record.log_date,
            symptoms=record.symptoms,
            notes=record.notes,
            tags=list(record.tags),
            created_at=record.created_at,
        )


class LogListResponse(BaseModel):
    """A list of health logs."""

    logs: list[LogResponse]


class MonthCursorResponse(BaseModel):
    """Year and month of a calendar page."""

    year: int
    month: int

    @classmethod
    def from_cursor(cls, cursor: MonthCursor) -> "MonthCursorResponse":
        return cls(year=cursor.year, month=cursor.month)


class CalendarCellResponse(BaseModel):
    """Single calendar grid cell."""

    day: int | None
    has_entry: bool
    is_today: bool

    @classmethod
    def from_cell(cls, cell: CalendarCell) -> "CalendarCellResponse":
        return cls(day=cell.day, has_entry=cell.has_entry, is_today=cell.is_today)


class CalendarResponse(BaseModel):
    """A rendered month calendar."""

    year: int
    month: int
    label: str
    weekdays: list[str]
    cells: list[CalendarCellResponse]
    previous: MonthCursorResponse | None
    next: MonthCursorResponse | None

    @classmethod
    def from_month(
        cls, month: CalendarMonth, weekdays: list[str]
    ) -> "CalendarResponse":
        return cls(
            year=month.cursor.year,
            month=month.cursor.month,
            label=month.label,
            weekdays=weekdays,
            cells=[CalendarCellResponse.from_cell(cell) for cell in month.cells],
            previous=_cursor_or_none(month.previous),
            next=_cursor_or_none(month.next),
        )


class DaySelectionResponse(BaseModel):
    """Logs for a clicked calendar day."""

    day: date | None
    logs: list[LogResponse]


class TagCountResponse(BaseModel):
    """Tag frequency entry."""

    tag: str
    count: int


class DailyCountResponse(BaseModel):
    """Per-day chart point."""

    day: date
    label: str
    count: int


class SummaryResponse(BaseModel):
    """Trailing-window statistics."""

    window_start: date
    window_end: date
    total_count: int
    daily_average: float
    top_tags: list[TagCountResponse]
    daily_series: list[DailyCountResponse]

    @classmethod
    def from_stats(
        cls, stats: SummaryStats, window_start: date, window_end: date
    ) -> "SummaryResponse":
        return cls(
            window_start=window_start,
            window_end=window_end,
            total_count=stats.total_count,
            daily_average=round(stats.daily_average, 1),
            top_tags=[
                TagCountResponse(tag=item.tag, count=item.count)
                for item in stats.ranked_tags
            ],
            daily_series=[
                DailyCountResponse(day=item.day, label=item.label, count=item.count)
                for item in stats.daily_series
            ],
        )


class ChatRequest(BaseModel):
    """Conversation history sent to the assistant."""

    messages: list[ChatMessage] = Field(default_factory=list)


class ChatResponse(BaseModel):
    """Assistant reply."""

    reply: str


def _cursor_or_none(cursor: MonthCursor | None) -> MonthCursorResponse | None:
    return MonthCursorResponse.from_cursor(cursor) if cursor is not None else None
