"""Domain models for the health journal."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """An authenticated user resolved from an access token."""

    id: UUID
    email: str | None = None
