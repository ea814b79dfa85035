"""Catalog feeds: where the list of known badges comes from."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..exceptions import RemoteTransportError, SnapshotError, SnapshotFormatError
from .catalog_models import Badge


class CatalogRecord(BaseModel):
    id: str = Field(..., min_length=1)
    category: str | None = None
    imageRef: str | None = None
    selected: list[bool] = Field(default_factory=list)


_RECORDS = TypeAdapter(list[CatalogRecord])


def parse_catalog_payload(payload: Any) -> list[Badge]:
    """Accept either a list of records or an ``{id: record}`` mapping."""
    if isinstance(payload, dict):
        payload = [{"id": key, **value} if isinstance(value, dict) else value for key, value in payload.items()]
    try:
        records = _RECORDS.validate_python(payload)
    except ValidationError as exc:
        raise SnapshotFormatError(f"invalid catalog payload: {exc.error_count()} errors") from exc
    return [Badge.from_record(record.model_dump()) for record in records]


class CatalogSource(ABC):
    """Base interface for catalog feeds."""

    @abstractmethod
    async def fetch(self) -> list[Badge]:
        """Return every badge currently offered by the feed."""


@dataclass(slots=True)
class JsonFileCatalogSource(CatalogSource):
    """Read the catalog from a JSON file kept in the state directory."""

    path: Path

    async def fetch(self) -> list[Badge]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SnapshotError(f"cannot read catalog file {self.path.name}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SnapshotFormatError(f"catalog file {self.path.name} is not valid JSON") from exc
        return parse_catalog_payload(payload)


@dataclass(slots=True)
class RemoteCatalogSource(CatalogSource):
    """Fetch the catalog as JSON from an HTTP endpoint."""

    url: str
    timeout_seconds: float = 30.0

    async def fetch(self) -> list[Badge]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as exc:
            raise RemoteTransportError(f"catalog request failed: {exc}") from exc
        if response.status_code != 200:
            raise RemoteTransportError(f"catalog request failed with status {response.status_code}")
        try:
            payload = response.json()
        except ValueError as exc:
            raise SnapshotFormatError("catalog response is not valid JSON") from exc
        return parse_catalog_payload(payload)
