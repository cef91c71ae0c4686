from typing import Any

from pydantic import BaseModel

from ..core.enums import EventType


class EventResponse(BaseModel):
    id: int
    adventurer_id: str
    event_type: EventType
    timestamp: int
    description: str | None
    data: dict[str, Any]

    class Config:
        from_attributes = True
