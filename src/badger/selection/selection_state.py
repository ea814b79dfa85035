"""Shared catalog/selection/slot-table container."""

from __future__ import annotations

import threading
from typing import Iterable, Mapping

import structlog

from ..catalog.catalog_models import SLOT_IDS, Badge, Snapshot, copy_snapshot
from ..catalog.catalog_service import Catalog, derive_categories
from ..exceptions import InvalidOperatorInput
from ..slots.slot_table import SlotTable
from ..slots.slots_models import Slot
from ..storage.snapshot_store import CURRENT_SELECTION, SnapshotStore

logger = structlog.get_logger(__name__)

SlotSubmission = Mapping[str, Iterable[str]]


def compute_selection(catalog: Catalog, assignments: SlotSubmission) -> Snapshot:
    """Return a new snapshot where each badge is selected exactly for the slots naming it.

    Badges missing from every slot keep their place with an all-false vector;
    badge ids unknown to the catalog are ignored.
    """
    unknown = sorted(set(assignments) - set(SLOT_IDS))
    if unknown:
        raise InvalidOperatorInput(f"Unknown slot ids: {', '.join(unknown)}")
    chosen = {slot_id: set(assignments.get(slot_id, ())) for slot_id in SLOT_IDS}
    snapshot: Snapshot = {}
    for badge in catalog:
        updated = badge.copy()
        updated.selected = [badge.id in chosen[slot_id] for slot_id in SLOT_IDS]
        snapshot[badge.id] = updated
    return snapshot


def submission_from_snapshot(snapshot: Mapping[str, Badge]) -> dict[str, list[str]]:
    submission: dict[str, list[str]] = {slot_id: [] for slot_id in SLOT_IDS}
    for badge in snapshot.values():
        for slot_id, selected in zip(SLOT_IDS, badge.selected):
            if selected:
                submission[slot_id].append(badge.id)
    return submission


class BadgeState:
    """Owns the catalog, the selection and the slot table behind one lock.

    Readers get copies; writers replace the catalog wholesale and rebuild the
    slot table before releasing the lock.
    """

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store
        self._lock = threading.RLock()
        self._save_lock = threading.Lock()
        self._catalog = Catalog()
        self._slots = SlotTable()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._catalog.snapshot()

    def categories(self) -> dict[str, list[Badge]]:
        return derive_categories(self._catalog)

    def slots(self) -> list[Slot]:
        with self._lock:
            return self._slots.snapshot()

    def apply_slot_submission(self, assignments: SlotSubmission) -> Snapshot:
        """Publish the new selection, then persist it outside the state lock.

        ``_save_lock`` is taken before the state lock is released so saves
        land in publish order.
        """
        with self._lock:
            snapshot = compute_selection(self._catalog, assignments)
            self._publish(Catalog(badges=snapshot))
            self._save_lock.acquire()
        try:
            self._store.save(CURRENT_SELECTION, snapshot)
        finally:
            self._save_lock.release()
        return copy_snapshot(snapshot)

    def apply_snapshot(self, snapshot: Mapping[str, Badge]) -> Snapshot:
        return self.apply_slot_submission(submission_from_snapshot(snapshot))

    def restore(self, snapshot: Mapping[str, Badge]) -> Snapshot:
        """Seed an empty catalog from a stored selection, else apply it."""
        with self._lock:
            if not len(self._catalog):
                self._publish(Catalog(badges=copy_snapshot(snapshot)))
                logger.info("selection.restored", badges=len(snapshot))
                return self._catalog.snapshot()
            return self.apply_snapshot(snapshot)

    def replace_catalog(self, fresh: Catalog) -> None:
        with self._lock:
            self._publish(self._catalog.merged_with(fresh))
        logger.info("catalog.replaced", badges=len(fresh))

    def assign(self, slot_id: str, badge_id: str | None) -> bool:
        with self._lock:
            if badge_id is not None and badge_id not in self._catalog:
                logger.warning("slot.assign.stale", slot_id=slot_id, badge_id=badge_id)
                return False
            self._slots.assign(slot_id, badge_id)
            return True

    def assigned_badge(self, slot_id: str) -> Badge | None:
        with self._lock:
            if slot_id not in self._slots:
                raise KeyError(slot_id)
            badge_id = self._slots.get(slot_id).assigned_badge
            if badge_id is None:
                return None
            badge = self._catalog.get(badge_id)
            return badge.copy() if badge is not None else None

    def _publish(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._slots.rebuild(catalog.badges, catalog)
