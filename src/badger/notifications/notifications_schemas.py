from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class NotificationPayload(BaseModel):
    timestamp: datetime
    message: str
    text: str


class NotificationCreateRequest(BaseModel):
    message: str = Field(..., min_length=1)
