"""Catalog container and derived category index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from .catalog_models import UNCATEGORIZED, Badge, Snapshot, copy_snapshot
from .catalog_source import CatalogSource


@dataclass(frozen=True, slots=True)
class Catalog:
    """Read-mostly map of every known badge.

    A catalog is never mutated in place by readers: reloading builds a new
    instance which the owning state container publishes in one assignment.
    """

    badges: Mapping[str, Badge] = field(default_factory=dict)

    @classmethod
    async def load(cls, source: CatalogSource) -> "Catalog":
        return cls.from_badges(await source.fetch())

    @classmethod
    def from_badges(cls, badges: Iterable[Badge]) -> "Catalog":
        return cls(badges={badge.id: badge for badge in badges})

    def merged_with(self, fresh: "Catalog") -> "Catalog":
        """Return ``fresh`` carrying over selection vectors of badges already known."""
        merged: Snapshot = {}
        for badge_id, badge in fresh.badges.items():
            updated = badge.copy()
            previous = self.badges.get(badge_id)
            if previous is not None:
                updated.selected = list(previous.selected)
            merged[badge_id] = updated
        return Catalog(badges=merged)

    def snapshot(self) -> Snapshot:
        return copy_snapshot(self.badges)

    def get(self, badge_id: str) -> Badge | None:
        return self.badges.get(badge_id)

    def __contains__(self, badge_id: object) -> bool:
        return badge_id in self.badges

    def __iter__(self) -> Iterator[Badge]:
        return iter(self.badges.values())

    def __len__(self) -> int:
        return len(self.badges)


def derive_categories(catalog: Catalog) -> dict[str, list[Badge]]:
    """Group badges by category, sorted by category name then badge id."""
    grouped: dict[str, list[Badge]] = {}
    for badge in catalog:
        category = badge.category.strip() or UNCATEGORIZED
        grouped.setdefault(category, []).append(badge)
    return {
        category: sorted(grouped[category], key=lambda badge: badge.id)
        for category in sorted(grouped)
    }
