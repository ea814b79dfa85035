from __future__ import annotations

import pytest

from src.badger.exceptions import RemoteAuthenticationError
from src.badger.notifications.notification_log import NotificationLog
from src.badger.remote.session_service import SessionService
from tests.mocks.remote import FakeRemote


@pytest.mark.asyncio
async def test_successful_login_opens_ready_gate() -> None:
    notifications = NotificationLog()
    service = SessionService(remote=FakeRemote(), notifications=notifications)

    assert await service.login("meeple", "secret") is True

    assert service.ready.is_set()
    assert notifications.recent()[0].message == "Login successful. Reload page"


@pytest.mark.asyncio
async def test_failed_login_is_notified_and_gate_stays_closed() -> None:
    notifications = NotificationLog()
    remote = FakeRemote(login_error=RemoteAuthenticationError("Login failed"))
    service = SessionService(remote=remote, notifications=notifications)

    assert await service.login("meeple", "wrong") is False

    assert not service.ready.is_set()
    assert notifications.recent()[0].message == "Login failed"
