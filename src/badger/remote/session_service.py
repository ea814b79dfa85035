"""Remote session holder and startup gate."""

from __future__ import annotations

import asyncio

import structlog

from ..exceptions import RemoteError
from ..notifications.notification_log import NotificationLog
from .remote_client import RemoteAssignmentService

logger = structlog.get_logger(__name__)


class SessionService:
    """Log into the remote service and open the ``ready`` gate on success."""

    def __init__(self, *, remote: RemoteAssignmentService, notifications: NotificationLog) -> None:
        self.remote = remote
        self.notifications = notifications
        self.ready = asyncio.Event()

    async def login(self, username: str, password: str) -> bool:
        try:
            await self.remote.login(username, password)
        except RemoteError as exc:
            logger.warning("session.login.failed", username=username, error=str(exc))
            self.notifications.record(str(exc))
            return False
        self.notifications.record("Login successful. Reload page")
        self.ready.set()
        return True
