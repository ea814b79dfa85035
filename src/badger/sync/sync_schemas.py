from pydantic import BaseModel


class SyncOutcomeResponse(BaseModel):
    updated: list[str]
    failed: list[str]
    authentication_failed: bool
    message: str
