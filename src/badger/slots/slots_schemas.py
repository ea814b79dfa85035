"""Pydantic schemas for slot routes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.catalog_schemas import BadgePayload


class SlotResponse(BaseModel):
    slot_id: str
    assigned_badge: str | None
    candidates: list[str]


class SelectionSubmitRequest(BaseModel):
    slots: dict[str, list[str]] = Field(default_factory=dict)


class SelectionResponse(BaseModel):
    badges: list[BadgePayload]
    slots: list[SlotResponse]
