"""Tests for HTTP-based adapters."""

import asyncio
from uuid import uuid4

import httpx
import pytest

from health_journal.adapters.openai_chat_client import OpenAIChatClient
from health_journal.adapters.supabase_auth_client import HttpxSupabaseAuthClient


class _FakeCompletions:
    def __init__(self, content: str | None) -> None:
        self.content = content
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        return type("Completion", (), {"choices": [choice]})()


class _FakeOpenAI:
    def __init__(self, content: str | None) -> None:
        self.chat = type("Chat", (), {"completions": _FakeCompletions(content)})()


def test_openai_chat_client_returns_first_choice() -> None:
    fake = _FakeOpenAI("Rest and hydrate.")
    client = OpenAIChatClient(client=fake)

    reply = asyncio.run(
        client.complete(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "Hi"}],
            temperature=0.7,
            max_tokens=500,
        )
    )

    assert reply == "Rest and hydrate."
    assert fake.chat.completions.last_payload["max_tokens"] == 500


def test_openai_chat_client_handles_empty_content() -> None:
    client = OpenAIChatClient(client=_FakeOpenAI(None))

    reply = asyncio.run(
        client.complete(model="m", messages=[], temperature=0.0, max_tokens=1)
    )

    assert reply == ""


def test_supabase_auth_client_resolves_user() -> None:
    user_id = uuid4()

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/user"
        assert request.headers["apikey"] == "anon-key"
        if request.headers["Authorization"] != "Bearer good":
            return httpx.Response(401, json={"msg": "invalid JWT"})
        return httpx.Response(200, json={"id": str(user_id), "email": "a@b.c"})

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxSupabaseAuthClient(
        supabase_url="https://example.supabase.co",
        api_key="anon-key",
        http_client=async_client,
    )

    user = asyncio.run(client.get_user("good"))
    rejected = asyncio.run(client.get_user("bad"))

    assert user is not None
    assert user.id == user_id
    assert user.email == "a@b.c"
    assert rejected is None


def test_supabase_auth_client_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxSupabaseAuthClient(
        supabase_url="https://example.supabase.co",
        api_key="anon-key",
        http_client=async_client,
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_user("token"))
