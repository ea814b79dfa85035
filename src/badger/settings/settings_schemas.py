from pydantic import BaseModel, Field


class IntervalResponse(BaseModel):
    interval_minutes: int


class IntervalUpdateRequest(BaseModel):
    interval_minutes: int = Field(..., ge=1)
