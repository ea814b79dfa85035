"""Manual randomize trigger."""

from fastapi import APIRouter, Depends, Request

from .randomizer import RandomizeService
from .sync_schemas import SyncOutcomeResponse

router = APIRouter(prefix="/api/randomize", tags=["sync"])


def get_randomizer(request: Request) -> RandomizeService:
    try:
        return request.app.state.randomizer  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("RandomizeService is not configured") from exc


@router.post("/", response_model=SyncOutcomeResponse)
async def randomize_now(
    randomizer: RandomizeService = Depends(get_randomizer),
) -> SyncOutcomeResponse:
    outcome = await randomizer.randomize_and_sync()
    return SyncOutcomeResponse(
        updated=outcome.updated,
        failed=outcome.failed,
        authentication_failed=outcome.authentication_failed,
        message=outcome.summary(),
    )
