"""Models for assistant chat messages."""

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Single message in a chat conversation."""

    role: Literal["system", "user", "assistant"]
    content: str = Field(min_length=1)
