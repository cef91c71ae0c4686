"""
Progression event log.

Helpers only stage rows on the session; they are committed (or rolled back)
together with the adventurer change that produced them.
"""

from sqlalchemy.orm import Session

from .models import AdventurerEvent
from ..core.enums import EventType


def record_event(
    db: Session,
    adventurer_id: str,
    event_type: EventType,
    timestamp: int,
    description: str | None = None,
    data: dict | None = None,
) -> AdventurerEvent:
    event = AdventurerEvent(
        adventurer_id=adventurer_id,
        event_type=event_type,
        timestamp=timestamp,
        description=description,
        data=data or {},
    )
    db.add(event)
    return event


def get_events(db: Session, adventurer_id: str, skip: int = 0, limit: int = 100) -> list[AdventurerEvent]:
    return (
        db.query(AdventurerEvent)
        .filter(AdventurerEvent.adventurer_id == adventurer_id)
        .order_by(AdventurerEvent.timestamp.desc(), AdventurerEvent.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


# Helper functions for common event types
def log_created(db: Session, adventurer_id: str, timestamp: int, name: str) -> AdventurerEvent:
    return record_event(db, adventurer_id, EventType.CREATED, timestamp, data={"name": name})


def log_updated(db: Session, adventurer_id: str, timestamp: int, fields: dict) -> AdventurerEvent:
    return record_event(db, adventurer_id, EventType.UPDATED, timestamp, data={"fields": fields})


def log_deleted(db: Session, adventurer_id: str, timestamp: int) -> AdventurerEvent:
    return record_event(db, adventurer_id, EventType.DELETED, timestamp)


def log_experience_awarded(
    db: Session,
    adventurer_id: str,
    timestamp: int,
    amount: int,
    reason: str | None,
    distribution: dict[str, int],
) -> AdventurerEvent:
    return record_event(
        db,
        adventurer_id,
        EventType.EXPERIENCE_AWARDED,
        timestamp,
        description=reason,
        data={"experience_points": amount, "distribution": distribution},
    )


def log_level_up(db: Session, adventurer_id: str, timestamp: int, old_level: int, new_level: int) -> AdventurerEvent:
    return record_event(
        db,
        adventurer_id,
        EventType.LEVEL_UP,
        timestamp,
        data={"old_level": old_level, "new_level": new_level},
    )


def log_proficiency_level_up(db: Session, adventurer_id: str, timestamp: int, skill: str, new_level: int) -> AdventurerEvent:
    return record_event(
        db,
        adventurer_id,
        EventType.PROFICIENCY_LEVEL_UP,
        timestamp,
        data={"skill": skill, "new_level": new_level},
    )


def log_mentor_assigned(db: Session, adventurer_id: str, timestamp: int, mentor_id: str) -> AdventurerEvent:
    return record_event(db, adventurer_id, EventType.MENTOR_ASSIGNED, timestamp, data={"mentor_id": mentor_id})


def log_guidance_recorded(
    db: Session,
    adventurer_id: str,
    timestamp: int,
    session_id: str,
    mentor_id: str,
    notes: str | None = None,
) -> AdventurerEvent:
    return record_event(
        db,
        adventurer_id,
        EventType.GUIDANCE_RECORDED,
        timestamp,
        description=notes,
        data={"session_id": session_id, "mentor_id": mentor_id},
    )
