"""Slot domain dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..catalog.catalog_models import Badge


@dataclass(slots=True)
class Slot:
    id: str
    assigned_badge: str | None = None
    candidates: dict[str, Badge] = field(default_factory=dict)

    def copy(self) -> "Slot":
        return Slot(
            id=self.id,
            assigned_badge=self.assigned_badge,
            candidates={badge_id: badge.copy() for badge_id, badge in self.candidates.items()},
        )
