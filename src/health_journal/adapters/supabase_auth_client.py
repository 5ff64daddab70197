"""Supabase Auth (GoTrue) client adapter."""

from dataclasses import dataclass
from uuid import UUID

import httpx

from health_journal.domain.models import AuthUser
from health_journal.services.auth import AuthClient


@dataclass
class HttpxSupabaseAuthClient(AuthClient):
    """Resolves access tokens through the Supabase Auth REST API."""

    supabase_url: str
    api_key: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, supabase_url: str, api_key: str) -> "HttpxSupabaseAuthClient":
        """Create an auth client with a managed httpx session."""
        return cls(
            supabase_url=supabase_url.rstrip("/"),
            api_key=api_key,
            http_client=httpx.AsyncClient(),
        )

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for an access token, or None when rejected."""
        url = f"{self.supabase_url}/auth/v1/user"
        response = await self.http_client.get(
            url,
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {access_token}",
            },
            timeout=10,
        )
        if response.status_code in {
            httpx.codes.UNAUTHORIZED,
            httpx.codes.FORBIDDEN,
        }:
            return None
        response.raise_for_status()
        payload = response.json()
        return AuthUser(id=UUID(payload["id"]), email=payload.get("email"))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
