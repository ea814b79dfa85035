"""Badge domain dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

SLOT_COUNT = 5
SLOT_IDS: tuple[str, ...] = tuple(str(index) for index in range(1, SLOT_COUNT + 1))
UNCATEGORIZED = "Uncategorized"


def normalize_selected(values: Iterable[bool] | None) -> list[bool]:
    """Return a selection vector padded or truncated to ``SLOT_COUNT`` entries."""
    vector = [bool(value) for value in (values or [])][:SLOT_COUNT]
    vector.extend([False] * (SLOT_COUNT - len(vector)))
    return vector


@dataclass(slots=True)
class Badge:
    id: str
    category: str = ""
    image_ref: str = ""
    selected: list[bool] = field(default_factory=lambda: [False] * SLOT_COUNT)

    def __post_init__(self) -> None:
        self.selected = normalize_selected(self.selected)

    @property
    def is_active(self) -> bool:
        return any(self.selected)

    def selected_for(self, slot_id: str) -> bool:
        return self.selected[SLOT_IDS.index(slot_id)]

    def copy(self) -> "Badge":
        return Badge(
            id=self.id,
            category=self.category,
            image_ref=self.image_ref,
            selected=list(self.selected),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "imageRef": self.image_ref,
            "selected": list(self.selected),
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Badge":
        return cls(
            id=str(record["id"]),
            category=str(record.get("category") or ""),
            image_ref=str(record.get("imageRef") or ""),
            selected=normalize_selected(record.get("selected")),
        )


Snapshot = dict[str, Badge]


def copy_snapshot(snapshot: Mapping[str, Badge]) -> Snapshot:
    return {badge_id: badge.copy() for badge_id, badge in snapshot.items()}
