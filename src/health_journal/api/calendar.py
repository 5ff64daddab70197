"""Calendar endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from health_journal.api.dependencies import get_container, require_user
from health_journal.api.schemas import (
    CalendarResponse,
    DaySelectionResponse,
    LogResponse,
)
from health_journal.domain.calendar import MonthCursor
from health_journal.domain.models import AuthUser  # noqa: TC001
from health_journal.services.calendar import advance_month, date_clicked, weekday_names

if TYPE_CHECKING:
    from datetime import date

    from health_journal.containers import AppContainer

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("")
async def get_calendar(  # noqa: PLR0913
    request: Request,
    year: int | None = Query(default=None, ge=1, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
    delta: int = Query(default=0),
    user: AuthUser = Depends(require_user),
) -> CalendarResponse:
    """Return the month grid, optionally shifted by ``delta`` months."""
    container: AppContainer = get_container(request)
    today = container.clock.today()
    cursor = _resolve_cursor(today, year, month)
    try:
        cursor = advance_month(cursor, delta)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    calendar_month = container.calendar_service.get_month(user.id, cursor, today)
    return CalendarResponse.from_month(calendar_month, weekday_names())


@router.get("/day")
async def select_day(
    request: Request,
    year: int = Query(ge=1, le=9999),
    month: int = Query(ge=1, le=12),
    day: int | None = Query(default=None),
    user: AuthUser = Depends(require_user),
) -> DaySelectionResponse:
    """Resolve a clicked calendar cell to its date and logs."""
    container: AppContainer = get_container(request)
    try:
        selected = date_clicked(MonthCursor(year=year, month=month), day)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if selected is None:
        return DaySelectionResponse(day=None, logs=[])
    records = container.health_log_service.list_for_day(user.id, selected)
    return DaySelectionResponse(
        day=selected, logs=[LogResponse.from_record(log) for log in records]
    )


def _resolve_cursor(today: date, year: int | None, month: int | None) -> MonthCursor:
    current = MonthCursor.containing(today)
    return MonthCursor(year=year or current.year, month=month or current.month)
