"""Pydantic schemas for catalog and badge payloads."""

from __future__ import annotations

from pydantic import BaseModel

from .catalog_models import Badge


class BadgePayload(BaseModel):
    id: str
    category: str
    image_ref: str
    selected: list[bool]

    @classmethod
    def from_badge(cls, badge: Badge) -> "BadgePayload":
        return cls(
            id=badge.id,
            category=badge.category,
            image_ref=badge.image_ref,
            selected=list(badge.selected),
        )


class CatalogResponse(BaseModel):
    total: int
    categories: dict[str, list[BadgePayload]]
