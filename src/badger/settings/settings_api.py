"""Routes for runtime settings."""

from fastapi import APIRouter, Depends, Request

from .settings_schemas import IntervalResponse, IntervalUpdateRequest
from .settings_service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["settings"])


def get_settings_service(request: Request) -> SettingsService:
    try:
        return request.app.state.settings_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("SettingsService is not configured") from exc


@router.get("/interval", response_model=IntervalResponse)
def read_interval(service: SettingsService = Depends(get_settings_service)) -> IntervalResponse:
    return IntervalResponse(**service.load())


@router.put("/interval", response_model=IntervalResponse)
def update_interval(
    payload: IntervalUpdateRequest,
    service: SettingsService = Depends(get_settings_service),
) -> IntervalResponse:
    return IntervalResponse(**service.set_interval(payload.interval_minutes))
