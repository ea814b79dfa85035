"""Application configuration builder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import StartupError


@dataclass(slots=True)
class RemoteSettings:
    base_url: str
    catalog_url: str | None
    timeout_seconds: float
    username: str | None
    password: str | None


@dataclass(slots=True)
class AppConfig:
    state_dir: Path
    interval_minutes: int
    rotation_buffer_seconds: float
    retry_backoff_seconds: float
    remote: RemoteSettings
    background_enabled: bool = True


def _default_state_dir() -> Path:
    return Path.home() / ".microBadger"


def _ensure_state_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StartupError(f"cannot create state directory {path}: {exc}") from exc


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> AppConfig:
    """Load configuration from environment (state under ``~/.microBadger`` by default)."""
    raw_state_dir = os.getenv("BADGER_STATE_DIR")
    state_dir = Path(raw_state_dir).expanduser() if raw_state_dir else _default_state_dir()
    _ensure_state_dir(state_dir)

    remote = RemoteSettings(
        base_url=os.getenv("BADGER_REMOTE_BASE_URL", "https://boardgamegeek.com"),
        catalog_url=os.getenv("BADGER_CATALOG_URL") or None,
        timeout_seconds=float(os.getenv("BADGER_REMOTE_TIMEOUT_SECONDS", 30)),
        username=os.getenv("BADGER_USERNAME") or None,
        password=os.getenv("BADGER_PASSWORD") or None,
    )

    return AppConfig(
        state_dir=state_dir,
        interval_minutes=max(1, int(os.getenv("BADGER_INTERVAL_MINUTES", 1))),
        rotation_buffer_seconds=float(os.getenv("BADGER_ROTATION_BUFFER_SECONDS", 1)),
        retry_backoff_seconds=float(os.getenv("BADGER_RETRY_BACKOFF_SECONDS", 10)),
        remote=remote,
        background_enabled=not _env_flag("BADGER_DISABLE_BACKGROUND"),
    )
