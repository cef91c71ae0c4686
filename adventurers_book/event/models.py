from sqlalchemy import Column, Integer, String, Enum, JSON, ForeignKey

from ..database import Base
from ..core.enums import EventType


class AdventurerEvent(Base):
    __tablename__ = "adventurer_events"

    id = Column(Integer, primary_key=True, index=True)
    adventurer_id = Column(String(32), ForeignKey("adventurers.id"), nullable=False, index=True)
    event_type = Column(Enum(EventType), nullable=False, index=True)
    timestamp = Column(Integer, nullable=False, index=True)

    description = Column(String(500), nullable=True)
    data = Column(JSON, default=dict)
