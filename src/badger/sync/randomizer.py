"""Pick one badge per slot and push the picks to the remote service."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Sequence

import structlog

from ..exceptions import RemoteAuthenticationError, RemoteError
from ..notifications.notification_log import NotificationLog
from ..remote.remote_client import RemoteAssignmentService
from ..selection.selection_state import BadgeState
from ..slots.slots_models import Slot

logger = structlog.get_logger(__name__)


def pick_random_badges(slots: Sequence[Slot], rng: random.Random | None = None) -> list[str | None]:
    """Return one badge id per slot, ``None`` meaning "clear this slot".

    A badge already picked for an earlier slot is never picked again; a slot
    whose pool is empty or used up gets ``None``.
    """
    chooser = rng or random.Random()
    used: set[str] = set()
    picks: list[str | None] = []
    for slot in slots:
        pool = sorted(badge_id for badge_id in slot.candidates if badge_id not in used)
        if not pool:
            picks.append(None)
            continue
        badge_id = chooser.choice(pool)
        used.add(badge_id)
        picks.append(badge_id)
    return picks


@dataclass(slots=True)
class SyncOutcome:
    updated: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    errors: dict[str, RemoteError] = field(default_factory=dict)

    def authentication_error(self) -> RemoteAuthenticationError | None:
        for error in self.errors.values():
            if isinstance(error, RemoteAuthenticationError):
                return error
        return None

    @property
    def authentication_failed(self) -> bool:
        return self.authentication_error() is not None

    def summary(self) -> str:
        if not self.updated:
            return "Slots not updated"
        message = f"Slots {' '.join(self.updated)} updated successfully"
        if self.failed:
            message += f"; slots {' '.join(self.failed)} not updated"
        return message


class RandomizeService:
    """Run randomize-and-sync passes, one at a time."""

    def __init__(
        self,
        *,
        state: BadgeState,
        remote: RemoteAssignmentService,
        notifications: NotificationLog,
        rng: random.Random | None = None,
    ) -> None:
        self.state = state
        self.remote = remote
        self.notifications = notifications
        self._rng = rng or random.Random()
        self._lock = asyncio.Lock()

    async def randomize_and_sync(self) -> SyncOutcome:
        async with self._lock:
            slots = self.state.slots()
            picks = pick_random_badges(slots, self._rng)
            outcome = SyncOutcome()
            for slot, badge_id in zip(slots, picks):
                try:
                    if badge_id is None:
                        await self.remote.clear_slot(slot.id)
                    else:
                        await self.remote.set_slot(badge_id, slot.id)
                except RemoteError as exc:
                    logger.warning(
                        "sync.slot.failed", slot_id=slot.id, badge_id=badge_id, error=str(exc)
                    )
                    outcome.failed.append(slot.id)
                    outcome.errors[slot.id] = exc
                    continue
                if not self.state.assign(slot.id, badge_id):
                    logger.warning("sync.slot.stale", slot_id=slot.id, badge_id=badge_id)
                    outcome.failed.append(slot.id)
                    continue
                outcome.updated.append(slot.id)
            self.notifications.record(outcome.summary())
            return outcome
