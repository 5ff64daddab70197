"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from health_journal.adapters.openai_chat_client import OpenAIChatClient
from health_journal.adapters.supabase_auth_client import HttpxSupabaseAuthClient
from health_journal.adapters.supabase_health_log_repository import (
    SupabaseHealthLogRepository,
)
from health_journal.config import Settings
from health_journal.services.auth import AuthService
from health_journal.services.calendar import CalendarService
from health_journal.services.chat import ChatService
from health_journal.services.clock import Clock, SystemClock
from health_journal.services.logs import HealthLogService
from health_journal.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    auth_service: AuthService
    health_log_service: HealthLogService
    calendar_service: CalendarService
    summary_service: SummaryService
    chat_service: ChatService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    log_repository = SupabaseHealthLogRepository(supabase_client)
    auth_client = HttpxSupabaseAuthClient.create(
        supabase_url=resolved_settings.supabase_url,
        api_key=resolved_settings.supabase_anon_key,
    )
    chat_client = OpenAIChatClient.create(resolved_settings.openai_api_key)
    chat_service = ChatService(
        client=chat_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        max_tokens=resolved_settings.openai_max_tokens,
    )

    async def close_resources() -> None:
        await auth_client.close()
        await chat_client.close()

    return AppContainer(
        settings=resolved_settings,
        clock=SystemClock(resolved_settings.timezone),
        auth_service=AuthService(auth_client),
        health_log_service=HealthLogService(
            log_repository, recent_limit=resolved_settings.recent_logs_limit
        ),
        calendar_service=CalendarService(log_repository),
        summary_service=SummaryService(
            log_repository,
            window_days=resolved_settings.summary_window_days,
            top_n=resolved_settings.summary_top_tags,
        ),
        chat_service=chat_service,
        close_resources=close_resources,
    )
