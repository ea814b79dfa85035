"""Remote assignment service client (boardgamegeek microbadge slots)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from ..exceptions import RemoteAuthenticationError, RemoteTransportError

logger = structlog.get_logger(__name__)

# A logged-out session gets an 85 byte answer from the slot endpoint.
MIN_AUTHENTICATED_RESPONSE_BYTES = 86

AUTHENTICATION_HINT = (
    "Invalid username or password. Log in again from the control page."
)


def ensure_authenticated(payload: bytes, *, minimum: int = MIN_AUTHENTICATED_RESPONSE_BYTES) -> bytes:
    if len(payload) < minimum:
        raise RemoteAuthenticationError(AUTHENTICATION_HINT)
    return payload


class RemoteAssignmentService(ABC):
    """Capability used by the sync engine to apply slot assignments remotely."""

    @abstractmethod
    async def set_slot(self, badge_id: str, slot_number: str) -> bytes:
        """Place ``badge_id`` into ``slot_number`` and return the raw response."""

    @abstractmethod
    async def clear_slot(self, slot_number: str) -> bytes:
        """Empty ``slot_number`` and return the raw response."""

    async def login(self, username: str, password: str) -> None:
        """Open an authenticated session."""

    async def aclose(self) -> None:
        """Release network resources."""


@dataclass(slots=True)
class BggMicrobadgeClient(RemoteAssignmentService):
    """Hold a cookie session against the site and post slot forms."""

    base_url: str = "https://boardgamegeek.com"
    login_path: str = "/login/api/v1"
    badge_path: str = "/geekmicrobadge.php"
    timeout_seconds: float = 30.0
    min_response_bytes: int = MIN_AUTHENTICATED_RESPONSE_BYTES
    transport: httpx.AsyncBaseTransport | None = None
    _client: httpx.AsyncClient | None = field(default=None, init=False)

    @property
    def logged_in(self) -> bool:
        return self._client is not None

    async def login(self, username: str, password: str) -> None:
        client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self.transport,
            follow_redirects=True,
        )
        payload = {"credentials": {"username": username, "password": password}}
        try:
            response = await client.post(self.login_path, json=payload)
        except httpx.HTTPError as exc:
            await client.aclose()
            raise RemoteTransportError(f"login request failed: {exc}") from exc
        if response.status_code >= 400:
            await client.aclose()
            raise RemoteAuthenticationError("Login failed")
        await self.aclose()
        self._client = client
        logger.info("remote.login.succeeded", username=username)

    async def set_slot(self, badge_id: str, slot_number: str) -> bytes:
        return await self._post_form(
            {"badgeid": badge_id, "slot": slot_number, "ajax": "1", "action": "setslot"}
        )

    async def clear_slot(self, slot_number: str) -> bytes:
        return await self._post_form({"slot": slot_number, "ajax": "1", "action": "clearslot"})

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _post_form(self, data: dict[str, Any]) -> bytes:
        if self._client is None:
            raise RemoteAuthenticationError(AUTHENTICATION_HINT)
        try:
            response = await self._client.post(self.badge_path, data=data)
        except httpx.HTTPError as exc:
            raise RemoteTransportError(f"slot {data['slot']} request failed: {exc}") from exc
        return ensure_authenticated(response.content, minimum=self.min_response_bytes)
