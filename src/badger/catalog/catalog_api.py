"""Catalog browsing routes."""

from fastapi import APIRouter, Depends, Request

from ..selection.selection_state import BadgeState
from .catalog_schemas import BadgePayload, CatalogResponse

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_badge_state(request: Request) -> BadgeState:
    try:
        return request.app.state.badge_state  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("BadgeState is not configured") from exc


@router.get("/", response_model=CatalogResponse)
def read_catalog(state: BadgeState = Depends(get_badge_state)) -> CatalogResponse:
    categories = state.categories()
    return CatalogResponse(
        total=sum(len(badges) for badges in categories.values()),
        categories={
            category: [BadgePayload.from_badge(badge) for badge in badges]
            for category, badges in categories.items()
        },
    )
