"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, HTTPException, Request, status

from health_journal.domain.models import AuthUser  # noqa: TC001

if TYPE_CHECKING:
    from health_journal.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the application."""
    return request.app.state.container


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> AuthUser:
    """Resolve the bearer token to a user or reject the request."""
    container = get_container(request)
    token = _parse_bearer(authorization)
    user = await container.auth_service.authenticate(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def _parse_bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
