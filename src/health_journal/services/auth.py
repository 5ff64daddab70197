"""Authentication of API requests."""

from dataclasses import dataclass
from typing import Protocol

from health_journal.domain.models import AuthUser


class AuthClient(Protocol):
    """Interface for resolving access tokens."""

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user owning the token, or None if it is invalid."""


@dataclass
class AuthService:
    """Service that resolves bearer tokens to users."""

    client: AuthClient

    async def authenticate(self, access_token: str | None) -> AuthUser | None:
        """Return the authenticated user for a token, if any."""
        if not access_token:
            return None
        return await self.client.get_user(access_token)
