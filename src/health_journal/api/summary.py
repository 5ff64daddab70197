"""Weekly summary endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from health_journal.api.dependencies import get_container, require_user
from health_journal.api.schemas import SummaryResponse
from health_journal.domain.models import AuthUser  # noqa: TC001
from health_journal.services.summary import default_window_start

if TYPE_CHECKING:
    from health_journal.containers import AppContainer

router = APIRouter(prefix="/summary", tags=["summary"])


@router.get("")
async def get_summary(
    request: Request,
    days: int | None = Query(default=None, ge=1, le=90),
    top: int | None = Query(default=None, ge=0, le=20),
    user: AuthUser = Depends(require_user),
) -> SummaryResponse:
    """Return statistics for the trailing window ending today."""
    container: AppContainer = get_container(request)
    today = container.clock.today()
    window_days = days or container.summary_service.window_days
    stats = container.summary_service.get_summary(
        user.id, today, days=window_days, top_n=top
    )
    return SummaryResponse.from_stats(
        stats, window_start=default_window_start(today, window_days), window_end=today
    )
