"""Preset save/list routes and rotation control."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from ..api_errors import operator_error
from ..exceptions import InvalidOperatorInput
from ..selection.selection_state import BadgeState
from ..storage.snapshot_store import SnapshotStore
from .preset_rotation import PresetRotationScheduler
from .presets_schemas import (
    PresetListResponse,
    PresetSaveRequest,
    RotationRequest,
    RotationResponse,
)

router = APIRouter(prefix="/api/presets", tags=["presets"])


def get_snapshot_store(request: Request) -> SnapshotStore:
    try:
        return request.app.state.snapshot_store  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("SnapshotStore is not configured") from exc


def get_badge_state(request: Request) -> BadgeState:
    try:
        return request.app.state.badge_state  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("BadgeState is not configured") from exc


def get_rotation_scheduler(request: Request) -> PresetRotationScheduler:
    try:
        return request.app.state.rotation_scheduler  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("PresetRotationScheduler is not configured") from exc


@router.get("/", response_model=PresetListResponse)
def list_presets(store: SnapshotStore = Depends(get_snapshot_store)) -> PresetListResponse:
    return PresetListResponse(presets=store.list_presets())


@router.post("/", response_model=PresetListResponse, status_code=status.HTTP_201_CREATED)
def save_preset(
    payload: PresetSaveRequest,
    store: SnapshotStore = Depends(get_snapshot_store),
    state: BadgeState = Depends(get_badge_state),
) -> PresetListResponse:
    try:
        store.save_preset(payload.name, state.snapshot())
    except InvalidOperatorInput as exc:
        raise operator_error(exc) from None
    return PresetListResponse(presets=store.list_presets())


@router.get("/rotation", response_model=RotationResponse)
def read_rotation(
    scheduler: PresetRotationScheduler = Depends(get_rotation_scheduler),
) -> RotationResponse:
    return RotationResponse(rotating=scheduler.is_rotating, presets=scheduler.active_presets)


@router.post("/rotation", response_model=RotationResponse)
async def start_rotation(
    payload: RotationRequest,
    scheduler: PresetRotationScheduler = Depends(get_rotation_scheduler),
) -> RotationResponse:
    try:
        presets = await scheduler.start(payload.presets)
    except InvalidOperatorInput as exc:
        raise operator_error(exc) from None
    return RotationResponse(rotating=scheduler.is_rotating, presets=presets)
