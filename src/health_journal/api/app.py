"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from health_journal.api.calendar import router as calendar_router
from health_journal.api.chat import router as chat_router
from health_journal.api.logs import router as logs_router
from health_journal.api.summary import router as summary_router
from health_journal.app_logging import configure_logging
from health_journal.containers import AppContainer
from health_journal.domain.logs import PREDEFINED_TAGS


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Health Journal", lifespan=lifespan)
    app.state.container = container

    app.include_router(logs_router)
    app.include_router(calendar_router)
    app.include_router(summary_router)
    app.include_router(chat_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/tags")
    async def tags() -> dict[str, list[str]]:
        """Return the quick tags offered when recording a log."""
        return {"tags": list(PREDEFINED_TAGS)}

    return app
