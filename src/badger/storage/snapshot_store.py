"""File-backed selection snapshots guarded by a single-writer lock."""

from __future__ import annotations

import json
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..catalog.catalog_models import Badge, Snapshot
from ..exceptions import InvalidOperatorInput, SnapshotFormatError
from ..notifications.notification_log import NotificationLog

logger = structlog.get_logger(__name__)

CURRENT_SELECTION = "selected"
PRESET_PREFIX = "preset-"
SNAPSHOT_SUFFIX = ".mb"

_FORBIDDEN_NAME_CHARS = ("/", "\\", "\x00")


class SnapshotRecord(BaseModel):
    id: str | None = None
    category: str | None = None
    imageRef: str | None = None
    selected: list[bool] = []


_SNAPSHOT = TypeAdapter(dict[str, SnapshotRecord])


def preset_key(name: str) -> str:
    """Return the snapshot key for a preset name, rejecting unusable names."""
    cleaned = name.strip()
    if not cleaned:
        raise InvalidOperatorInput("Preset name not provided")
    if any(char in cleaned for char in _FORBIDDEN_NAME_CHARS) or cleaned in {".", ".."}:
        raise InvalidOperatorInput(f"Preset name '{name}' is not allowed")
    return PRESET_PREFIX + cleaned


def encode_snapshot(snapshot: Mapping[str, Badge]) -> str:
    return json.dumps({badge_id: badge.to_record() for badge_id, badge in snapshot.items()})


def decode_snapshot(raw: str) -> Snapshot:
    try:
        records = _SNAPSHOT.validate_json(raw)
    except ValidationError as exc:
        raise SnapshotFormatError(f"{exc.error_count()} invalid entries") from exc
    snapshot: Snapshot = {}
    for key, record in records.items():
        data = record.model_dump()
        data["id"] = data.get("id") or key
        badge = Badge.from_record(data)
        snapshot[badge.id] = badge
    return snapshot


@dataclass(slots=True)
class SnapshotStore:
    """Read and write named snapshots inside the state directory.

    Every load and save holds ``_lock`` for the whole file access, so at most
    one operation touches the backing files at a time. Failures never escape:
    they are logged, recorded in the notification log and downgraded to an
    empty snapshot (load) or a no-op (save).
    """

    root: Path
    notifications: NotificationLog
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{SNAPSHOT_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def load(self, name: str) -> Snapshot:
        path = self.path_for(name)
        with self._lock:
            if not path.exists():
                return {}
            try:
                raw = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("snapshot.load.unreadable", name=name, error=str(exc))
                self.notifications.record(f"Error reading file: {exc}")
                return {}
            try:
                return decode_snapshot(raw)
            except SnapshotFormatError as exc:
                logger.warning("snapshot.load.malformed", name=name, error=str(exc))
                self.notifications.record(f"Error in file format: {path.name}: {exc}")
                return {}

    def save(self, name: str, snapshot: Mapping[str, Badge]) -> bool:
        path = self.path_for(name)
        payload = encode_snapshot(snapshot)
        tmp_path = path.with_name(path.name + ".tmp")
        with self._lock:
            try:
                tmp_path.write_text(payload, encoding="utf-8")
                os.replace(tmp_path, path)
            except OSError as exc:
                logger.warning("snapshot.save.failed", name=name, error=str(exc))
                self.notifications.record(f"Error saving selections to file: {exc}")
                return False
        logger.debug("snapshot.saved", name=name, badges=len(snapshot))
        return True

    def list_presets(self) -> list[str]:
        try:
            entries = sorted(self.root.iterdir())
        except OSError as exc:
            logger.warning("snapshot.list.failed", error=str(exc))
            return []
        presets: list[str] = []
        for entry in entries:
            name = entry.name
            if entry.is_file() and name.startswith(PRESET_PREFIX) and name.endswith(SNAPSHOT_SUFFIX):
                presets.append(name[len(PRESET_PREFIX) : -len(SNAPSHOT_SUFFIX)])
        return presets

    def save_preset(self, name: str, snapshot: Mapping[str, Badge]) -> bool:
        return self.save(preset_key(name), snapshot)

    def load_preset(self, name: str) -> Snapshot:
        return self.load(preset_key(name))

    def preset_exists(self, name: str) -> bool:
        return self.exists(preset_key(name))
