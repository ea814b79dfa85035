from __future__ import annotations

from pathlib import Path
from typing import Iterable

from src.badger.catalog.catalog_models import SLOT_COUNT, Badge
from src.badger.catalog.catalog_service import Catalog
from src.badger.notifications.notification_log import NotificationLog
from src.badger.selection.selection_state import BadgeState
from src.badger.storage.snapshot_store import SnapshotStore


def make_badge(badge_id: str, *, category: str = "Games", slots: Iterable[int] = ()) -> Badge:
    selected = [False] * SLOT_COUNT
    for index in slots:
        selected[index - 1] = True
    return Badge(
        id=badge_id,
        category=category,
        image_ref=f"//cf.geekdo-static.com/mbs/mb_{badge_id}_0.gif",
        selected=selected,
    )


def build_state(
    root: Path, badges: Iterable[Badge] = ()
) -> tuple[BadgeState, SnapshotStore, NotificationLog]:
    notifications = NotificationLog()
    store = SnapshotStore(root=root, notifications=notifications)
    state = BadgeState(store)
    state.replace_catalog(Catalog.from_badges(badges))
    return state, store, notifications
