"""Remote service login route."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from .session_service import SessionService

router = APIRouter(prefix="/api/session", tags=["session"])


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    ready: bool


def get_session_service(request: Request) -> SessionService:
    try:
        return request.app.state.session_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("SessionService is not configured") from exc


@router.get("/", response_model=SessionResponse)
def read_session(service: SessionService = Depends(get_session_service)) -> SessionResponse:
    return SessionResponse(ready=service.ready.is_set())


@router.post("/", response_model=SessionResponse)
async def login(
    payload: LoginRequest,
    service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    if not await service.login(payload.username, payload.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"status": "error", "reason": "login_failed"},
        )
    return SessionResponse(ready=True)
