"""Slot inspection and selection submission routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from ..api_errors import operator_error
from ..catalog.catalog_schemas import BadgePayload
from ..exceptions import InvalidOperatorInput
from ..selection.selection_state import BadgeState
from .slots_models import Slot
from .slots_schemas import SelectionResponse, SelectionSubmitRequest, SlotResponse

router = APIRouter(prefix="/api/slots", tags=["slots"])


def get_badge_state(request: Request) -> BadgeState:
    try:
        return request.app.state.badge_state  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("BadgeState is not configured") from exc


@router.get("/")
def list_slots(state: BadgeState = Depends(get_badge_state)) -> list[SlotResponse]:
    return [_slot_response(slot) for slot in state.slots()]


@router.post("/selection")
def submit_selection(
    payload: SelectionSubmitRequest,
    state: BadgeState = Depends(get_badge_state),
) -> SelectionResponse:
    try:
        snapshot = state.apply_slot_submission(payload.slots)
    except InvalidOperatorInput as exc:
        raise operator_error(exc) from None
    return SelectionResponse(
        badges=[BadgePayload.from_badge(badge) for badge in snapshot.values()],
        slots=[_slot_response(slot) for slot in state.slots()],
    )


@router.get("/{slot_id}/image")
def assigned_badge_image(
    slot_id: str,
    state: BadgeState = Depends(get_badge_state),
) -> RedirectResponse:
    try:
        badge = state.assigned_badge(slot_id)
    except KeyError:
        raise _not_found(f"slot '{slot_id}' does not exist") from None
    if badge is None or not badge.image_ref:
        raise _not_found(f"slot '{slot_id}' has no assigned badge")
    return RedirectResponse(_absolute_url(badge.image_ref), status_code=status.HTTP_302_FOUND)


def _slot_response(slot: Slot) -> SlotResponse:
    return SlotResponse(
        slot_id=slot.id,
        assigned_badge=slot.assigned_badge,
        candidates=sorted(slot.candidates),
    )


def _absolute_url(image_ref: str) -> str:
    if image_ref.startswith("//"):
        return "https:" + image_ref
    return image_ref


def _not_found(details: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"status": "error", "reason": "not_found", "details": details},
    )
