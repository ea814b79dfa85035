"""FastAPI application entry point."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .catalog.catalog_source import CatalogSource
from .config import AppConfig, load_config
from .dependencies import include_routers
from .lifecycle import run_randomize_loop
from .logging import configure_logging
from .remote.remote_client import RemoteAssignmentService

logger = logging.getLogger(__name__)


async def _startup_background(app: FastAPI) -> None:
    config: AppConfig = app.state.config
    app.state.shutdown_event = asyncio.Event()
    app.state.randomize_task = None
    if not config.background_enabled:
        logger.info("Background tasks skipped: disabled via configuration")
        return
    if config.remote.username and config.remote.password:
        await app.state.session_service.login(config.remote.username, config.remote.password)
    app.state.randomize_task = asyncio.create_task(
        run_randomize_loop(
            session=app.state.session_service,
            state=app.state.badge_state,
            catalog_source=app.state.catalog_source,
            randomizer=app.state.randomizer,
            notifications=app.state.notifications,
            settings=app.state.settings_service,
            shutdown_event=app.state.shutdown_event,
            retry_backoff_seconds=config.retry_backoff_seconds,
        ),
        name="badger-randomize-loop",
    )


async def _shutdown_background(app: FastAPI) -> None:
    app.state.shutdown_event.set()
    await app.state.rotation_scheduler.stop()
    task: asyncio.Task[None] | None = app.state.randomize_task
    if task is not None:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
    app.state.randomize_task = None
    await app.state.remote_client.aclose()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await _startup_background(app)
    try:
        yield
    finally:
        await _shutdown_background(app)


def create_app(
    config: AppConfig | None = None,
    *,
    remote: RemoteAssignmentService | None = None,
    catalog_source: CatalogSource | None = None,
) -> FastAPI:
    """Build FastAPI instance with configured dependencies."""
    configure_logging()
    cfg = config or load_config()
    app = FastAPI(title="BadgeRotator", lifespan=lifespan)
    include_routers(app, cfg, remote=remote, catalog_source=catalog_source)
    return app
