"""Background rotation through named presets."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Sequence

from ..exceptions import InvalidOperatorInput, PresetNotFoundError
from ..notifications.notification_log import NotificationLog
from ..selection.selection_state import BadgeState
from ..storage.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


class PresetRotationScheduler:
    """Cycle the live selection through an ordered list of presets.

    Exactly one rotation task runs at a time: :meth:`start` signals the
    running task's cancel event and awaits its exit before spawning the next
    one. Starts are serialized by ``_start_lock``. Rotation wraps forever;
    only :meth:`stop` (used at shutdown) returns the scheduler to idle.
    """

    def __init__(
        self,
        *,
        state: BadgeState,
        store: SnapshotStore,
        notifications: NotificationLog,
        interval_seconds: Callable[[], float],
        buffer_seconds: float = 1.0,
    ) -> None:
        self.state = state
        self.store = store
        self.notifications = notifications
        self._interval_seconds = interval_seconds
        self._buffer_seconds = buffer_seconds
        self._start_lock = asyncio.Lock()
        self._task: asyncio.Task[None] | None = None
        self._cancel: asyncio.Event | None = None
        self._presets: list[str] = []

    @property
    def active_presets(self) -> list[str]:
        return list(self._presets) if self.is_rotating else []

    @property
    def is_rotating(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self, names: Sequence[str]) -> list[str]:
        """Replace any running rotation with one over the valid ``names``."""
        if not names:
            raise InvalidOperatorInput("No presets requested")
        available = set(await asyncio.to_thread(self.store.list_presets))
        requested = [name.strip() for name in names if name.strip() in available]
        if not requested:
            raise PresetNotFoundError("The requested preset does not exist")

        async with self._start_lock:
            await self._stop_current()
            cancel = asyncio.Event()
            self._cancel = cancel
            self._presets = requested
            self._task = asyncio.create_task(
                self._run(requested, cancel), name="badger-preset-rotation"
            )
        logger.info("Preset rotation started: %s", ", ".join(requested))
        return list(requested)

    async def stop(self) -> None:
        async with self._start_lock:
            await self._stop_current()

    async def _stop_current(self) -> None:
        task, cancel = self._task, self._cancel
        if cancel is not None:
            cancel.set()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
        self._task = None
        self._cancel = None
        self._presets = []

    async def _run(self, presets: list[str], cancel: asyncio.Event) -> None:
        while not cancel.is_set():
            for name in presets:
                if cancel.is_set():
                    return
                try:
                    await self._apply(name)
                except Exception:  # pragma: no cover
                    logger.exception("Applying preset %s failed", name)
                timeout = self._interval_seconds() + self._buffer_seconds
                try:
                    await asyncio.wait_for(cancel.wait(), timeout=timeout)
                except asyncio.TimeoutError:
                    continue
                return

    async def _apply(self, name: str) -> None:
        self.notifications.record(f"loading {name} preset")
        if not await asyncio.to_thread(self.store.preset_exists, name):
            self.notifications.record(f"preset {name} no longer exists, skipping")
            return
        snapshot = await asyncio.to_thread(self.store.load_preset, name)
        await asyncio.to_thread(self.state.apply_snapshot, snapshot)
