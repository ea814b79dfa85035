"""Pydantic schemas for preset routes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PresetSaveRequest(BaseModel):
    name: str = Field(..., min_length=1)


class PresetListResponse(BaseModel):
    presets: list[str]


class RotationRequest(BaseModel):
    presets: list[str] = Field(..., min_length=1)


class RotationResponse(BaseModel):
    rotating: bool
    presets: list[str]
