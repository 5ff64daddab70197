"""Health assistant chat service."""

from dataclasses import dataclass
from typing import Protocol

from health_journal.domain.chat import ChatMessage

SYSTEM_PROMPT = (
    "You are a helpful health assistant. Provide general wellness advice and "
    "health tips. Always remind users to consult healthcare professionals for "
    "serious concerns. Keep responses concise and supportive."
)


class ChatClient(Protocol):
    """Interface for LLM chat completion."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the assistant reply for a conversation."""


@dataclass
class ChatService:
    """Service that frames conversations for the health assistant."""

    client: ChatClient
    model: str
    temperature: float = 0.7
    max_tokens: int = 500

    async def reply(self, messages: list[ChatMessage]) -> str:
        """Return the assistant's reply to the conversation history."""
        if not messages:
            raise ValueError("Messages are required")
        payload = [{"role": "system", "content": SYSTEM_PROMPT}]
        payload.extend(
            {"role": message.role, "content": message.content} for message in messages
        )
        reply = await self.client.complete(
            model=self.model,
            messages=payload,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not reply:
            raise RuntimeError("Chat model returned an empty reply")
        return reply
