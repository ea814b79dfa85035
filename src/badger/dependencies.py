"""Dependency wiring helpers."""

from fastapi import FastAPI

from .catalog.catalog_api import router as catalog_router
from .catalog.catalog_source import CatalogSource, JsonFileCatalogSource, RemoteCatalogSource
from .config import AppConfig
from .notifications.notification_log import NotificationLog
from .notifications.notifications_api import router as notifications_router
from .presets.preset_rotation import PresetRotationScheduler
from .presets.presets_api import router as presets_router
from .remote.remote_client import BggMicrobadgeClient, RemoteAssignmentService
from .remote.session_api import router as session_router
from .remote.session_service import SessionService
from .selection.selection_state import BadgeState
from .settings.settings_api import router as settings_router
from .settings.settings_service import SettingsService
from .slots.slots_api import router as slots_router
from .storage.snapshot_store import CURRENT_SELECTION, SnapshotStore
from .sync.randomizer import RandomizeService
from .sync.sync_api import router as sync_router

CATALOG_FILE = "catalog.json"


def build_catalog_source(config: AppConfig) -> CatalogSource:
    if config.remote.catalog_url:
        return RemoteCatalogSource(
            url=config.remote.catalog_url,
            timeout_seconds=config.remote.timeout_seconds,
        )
    return JsonFileCatalogSource(path=config.state_dir / CATALOG_FILE)


def include_routers(
    app: FastAPI,
    config: AppConfig,
    *,
    remote: RemoteAssignmentService | None = None,
    catalog_source: CatalogSource | None = None,
) -> None:
    """Mount module routers and attach services."""
    notifications = NotificationLog()
    store = SnapshotStore(root=config.state_dir, notifications=notifications)
    badge_state = BadgeState(store)
    badge_state.restore(store.load(CURRENT_SELECTION))

    settings_service = SettingsService.from_config(config)
    remote_client = remote or BggMicrobadgeClient(
        base_url=config.remote.base_url,
        timeout_seconds=config.remote.timeout_seconds,
    )
    session_service = SessionService(remote=remote_client, notifications=notifications)
    randomizer = RandomizeService(
        state=badge_state,
        remote=remote_client,
        notifications=notifications,
    )
    rotation_scheduler = PresetRotationScheduler(
        state=badge_state,
        store=store,
        notifications=notifications,
        interval_seconds=settings_service.interval_seconds,
        buffer_seconds=config.rotation_buffer_seconds,
    )

    app.state.config = config
    app.state.notifications = notifications
    app.state.snapshot_store = store
    app.state.badge_state = badge_state
    app.state.settings_service = settings_service
    app.state.remote_client = remote_client
    app.state.session_service = session_service
    app.state.randomizer = randomizer
    app.state.rotation_scheduler = rotation_scheduler
    app.state.catalog_source = catalog_source or build_catalog_source(config)

    app.include_router(catalog_router)
    app.include_router(slots_router)
    app.include_router(sync_router)
    app.include_router(presets_router)
    app.include_router(notifications_router)
    app.include_router(settings_router)
    app.include_router(session_router)
