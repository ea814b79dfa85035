"""Lifecycle helpers wiring the randomize loop for FastAPI startup."""

from __future__ import annotations

import asyncio
import logging

from .catalog.catalog_service import Catalog
from .catalog.catalog_source import CatalogSource
from .exceptions import AppError
from .notifications.notification_log import NotificationLog
from .remote.session_service import SessionService
from .selection.selection_state import BadgeState
from .settings.settings_service import SettingsService
from .sync.randomizer import RandomizeService


logger = logging.getLogger(__name__)


async def refresh_catalog(state: BadgeState, source: CatalogSource) -> int:
    """Reload the catalog from ``source``; an empty feed keeps the current catalog."""

    fresh = await Catalog.load(source)
    if not len(fresh):
        logger.info("Catalog feed returned no badges; keeping %s known badges", len(state.catalog))
        return 0
    state.replace_catalog(fresh)
    return len(fresh)


async def randomize_cycle_once(
    *,
    state: BadgeState,
    catalog_source: CatalogSource,
    randomizer: RandomizeService,
    notifications: NotificationLog,
    settings: SettingsService,
    retry_backoff_seconds: float,
) -> float:
    """Run one refresh-and-randomize cycle and return the delay before the next one."""

    notifications.record("Attempting to randomize badges")
    try:
        await refresh_catalog(state, catalog_source)
    except AppError as exc:
        logger.warning("Catalog refresh failed: %s", exc)
        notifications.record("Failed")
        notifications.record(str(exc))
        return retry_backoff_seconds

    outcome = await randomizer.randomize_and_sync()
    auth_error = outcome.authentication_error()
    if auth_error is not None:
        notifications.record(str(auth_error))
        return retry_backoff_seconds
    return settings.interval_seconds()


async def _wait_until_ready(session: SessionService, shutdown_event: asyncio.Event) -> bool:
    ready = asyncio.create_task(session.ready.wait())
    stopped = asyncio.create_task(shutdown_event.wait())
    try:
        await asyncio.wait({ready, stopped}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        ready.cancel()
        stopped.cancel()
    return session.ready.is_set() and not shutdown_event.is_set()


async def run_randomize_loop(
    *,
    session: SessionService,
    state: BadgeState,
    catalog_source: CatalogSource,
    randomizer: RandomizeService,
    notifications: NotificationLog,
    settings: SettingsService,
    shutdown_event: asyncio.Event,
    retry_backoff_seconds: float = 10.0,
) -> None:
    """Wait for a remote session, then randomize until ``shutdown_event`` is signalled."""

    if not await _wait_until_ready(session, shutdown_event):
        return
    logger.info("Remote session ready; randomize loop started")
    while not shutdown_event.is_set():
        try:
            delay = await randomize_cycle_once(
                state=state,
                catalog_source=catalog_source,
                randomizer=randomizer,
                notifications=notifications,
                settings=settings,
                retry_backoff_seconds=retry_backoff_seconds,
            )
        except Exception as exc:
            logger.exception("Randomize cycle failed")
            notifications.record("Failed")
            notifications.record(str(exc) or type(exc).__name__)
            delay = retry_backoff_seconds
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=max(delay, 0.0))
        except asyncio.TimeoutError:
            continue


__all__ = [
    "randomize_cycle_once",
    "refresh_catalog",
    "run_randomize_loop",
]
