"""Fixed table of assignment slots and their candidate pools."""

from __future__ import annotations

from typing import Iterator, Mapping

from ..catalog.catalog_models import SLOT_IDS, Badge
from ..catalog.catalog_service import Catalog
from .slots_models import Slot


class SlotTable:
    """Slots ``1``..``K`` with derived candidate pools.

    Candidate pools are recomputed by :meth:`rebuild`; ``assigned_badge`` is
    only changed through :meth:`assign` by the sync engine.
    """

    def __init__(self, slot_ids: tuple[str, ...] = SLOT_IDS) -> None:
        self._slots: dict[str, Slot] = {slot_id: Slot(id=slot_id) for slot_id in slot_ids}

    def rebuild(self, selection: Mapping[str, Badge], catalog: Catalog) -> None:
        for index, slot in enumerate(self._slots.values()):
            pool: dict[str, Badge] = {}
            for badge_id, badge in selection.items():
                if not badge.selected[index]:
                    continue
                live = catalog.get(badge_id)
                if live is None:
                    continue
                pool[badge_id] = live
            slot.candidates = pool

    def assign(self, slot_id: str, badge_id: str | None) -> None:
        self._slots[slot_id].assigned_badge = badge_id

    def get(self, slot_id: str) -> Slot:
        return self._slots[slot_id]

    def snapshot(self) -> list[Slot]:
        return [slot.copy() for slot in self._slots.values()]

    def __contains__(self, slot_id: object) -> bool:
        return slot_id in self._slots

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._slots.values())
