"""Health assistant chat endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from health_journal.api.dependencies import get_container, require_user
from health_journal.api.schemas import ChatRequest, ChatResponse

if TYPE_CHECKING:
    from health_journal.containers import AppContainer

router = APIRouter(prefix="/chat", tags=["chat"])

_logger = logging.getLogger(__name__)


@router.post("", dependencies=[Depends(require_user)])
async def chat(payload: ChatRequest, request: Request) -> ChatResponse:
    """Return the assistant's reply to the conversation."""
    container: AppContainer = get_container(request)
    if not payload.messages:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Messages are required"
        )
    try:
        reply = await container.chat_service.reply(payload.messages)
    except Exception as exc:
        _logger.exception("Chat completion failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get AI response",
        ) from exc
    return ChatResponse(reply=reply)
