from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from src.badger.exceptions import RemoteAuthenticationError, RemoteTransportError
from src.badger.remote.remote_client import (
    MIN_AUTHENTICATED_RESPONSE_BYTES,
    BggMicrobadgeClient,
    ensure_authenticated,
)


def _transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


def test_ensure_authenticated_threshold() -> None:
    assert MIN_AUTHENTICATED_RESPONSE_BYTES == 86
    assert ensure_authenticated(b"x" * 86) == b"x" * 86
    with pytest.raises(RemoteAuthenticationError):
        ensure_authenticated(b"x" * 85)


@pytest.mark.asyncio
async def test_set_slot_posts_form_after_login() -> None:
    seen: list[tuple[str, dict[str, list[str]]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/login/api/v1":
            return httpx.Response(204, headers={"set-cookie": "SessionID=abc; Path=/"})
        seen.append((request.url.path, parse_qs(request.content.decode())))
        return httpx.Response(200, content=b"y" * 200)

    client = BggMicrobadgeClient(base_url="https://bgg.test", transport=_transport(handler))
    await client.login("meeple", "secret")

    body = await client.set_slot("1234", "2")
    await client.clear_slot("5")
    await client.aclose()

    assert body == b"y" * 200
    assert seen[0] == (
        "/geekmicrobadge.php",
        {"badgeid": ["1234"], "slot": ["2"], "ajax": ["1"], "action": ["setslot"]},
    )
    assert seen[1][1] == {"slot": ["5"], "ajax": ["1"], "action": ["clearslot"]}


@pytest.mark.asyncio
async def test_short_slot_response_raises_authentication_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/login/api/v1":
            return httpx.Response(200)
        return httpx.Response(200, content=b"z" * 40)

    client = BggMicrobadgeClient(base_url="https://bgg.test", transport=_transport(handler))
    await client.login("meeple", "secret")

    with pytest.raises(RemoteAuthenticationError):
        await client.set_slot("1", "3")
    await client.aclose()


@pytest.mark.asyncio
async def test_transport_failure_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/login/api/v1":
            return httpx.Response(200)
        raise httpx.ConnectTimeout("timed out", request=request)

    client = BggMicrobadgeClient(base_url="https://bgg.test", transport=_transport(handler))
    await client.login("meeple", "secret")

    with pytest.raises(RemoteTransportError):
        await client.clear_slot("1")
    await client.aclose()


@pytest.mark.asyncio
async def test_rejected_login_raises_authentication_error() -> None:
    client = BggMicrobadgeClient(
        base_url="https://bgg.test",
        transport=_transport(lambda request: httpx.Response(401)),
    )

    with pytest.raises(RemoteAuthenticationError):
        await client.login("meeple", "wrong")
    assert not client.logged_in


@pytest.mark.asyncio
async def test_calls_without_session_are_unauthenticated() -> None:
    client = BggMicrobadgeClient(base_url="https://bgg.test")

    with pytest.raises(RemoteAuthenticationError):
        await client.set_slot("1", "1")
