from .router import router
from .models import AdventurerEvent
from .schemas import EventResponse

__all__ = [
    "router",
    "AdventurerEvent",
    "EventResponse",
]
