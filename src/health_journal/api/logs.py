"""Health log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from health_journal.api.dependencies import get_container, require_user
from health_journal.api.schemas import LogCreateRequest, LogListResponse, LogResponse
from health_journal.domain.models import AuthUser  # noqa: TC001

if TYPE_CHECKING:
    from health_journal.containers import AppContainer

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("")
async def list_logs(
    request: Request,
    limit: int | None = Query(default=None, ge=1, le=100),
    user: AuthUser = Depends(require_user),
) -> LogListResponse:
    """Return the user's most recent logs."""
    container: AppContainer = get_container(request)
    records = container.health_log_service.list_recent(user.id, limit)
    return LogListResponse(logs=[LogResponse.from_record(log) for log in records])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_log(
    payload: LogCreateRequest,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> LogResponse:
    """Record a new health log, dated today unless a date is given."""
    container: AppContainer = get_container(request)
    try:
        record = container.health_log_service.add_log(
            user.id,
            log_date=payload.log_date or container.clock.today(),
            symptoms=payload.symptoms,
            notes=payload.notes,
            tags=payload.tags,
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return LogResponse.from_record(record)


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log(
    log_id: UUID,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> Response:
    """Delete one of the user's logs."""
    container: AppContainer = get_container(request)
    if not container.health_log_service.delete_log(user.id, log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
