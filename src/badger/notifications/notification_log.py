"""Bounded most-recent-first journal of operator visible events."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import structlog

logger = structlog.get_logger(__name__)

NOTIFICATION_LIMIT = 50


@dataclass(frozen=True, slots=True)
class NotificationEntry:
    timestamp: datetime
    message: str

    def render(self) -> str:
        return f"{self.timestamp:%Y-%m-%d %H:%M:%S} : {self.message}"


class NotificationLog:
    """Thread-safe notification journal holding the newest ``limit`` entries."""

    def __init__(
        self,
        limit: int = NOTIFICATION_LIMIT,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._entries: deque[NotificationEntry] = deque(maxlen=limit)
        self._lock = threading.Lock()
        self._clock = clock or datetime.now

    def record(self, message: str) -> NotificationEntry:
        entry = NotificationEntry(timestamp=self._clock(), message=message)
        with self._lock:
            self._entries.appendleft(entry)
        logger.info("notification.recorded", message=message)
        return entry

    def recent(self) -> list[NotificationEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
