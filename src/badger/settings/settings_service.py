"""Runtime settings shared by the randomize loop and preset rotation."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..config import AppConfig
from ..exceptions import InvalidOperatorInput


@dataclass(slots=True)
class SettingsService:
    """Hold the randomization interval; starts from ``AppConfig.interval_minutes``."""

    interval_minutes: int = 1
    _lock: threading.Lock = field(default_factory=threading.Lock)

    @classmethod
    def from_config(cls, config: AppConfig) -> "SettingsService":
        return cls(interval_minutes=config.interval_minutes)

    def load(self) -> dict[str, int]:
        with self._lock:
            return {"interval_minutes": self.interval_minutes}

    def set_interval(self, minutes: int) -> dict[str, int]:
        if minutes < 1:
            raise InvalidOperatorInput("Interval must be at least one minute")
        with self._lock:
            self.interval_minutes = minutes
        return self.load()

    def interval_seconds(self) -> float:
        with self._lock:
            return float(self.interval_minutes * 60)
