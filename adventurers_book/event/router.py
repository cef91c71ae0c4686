from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..adventurer.repository import load_adventurer
from . import service
from .schemas import EventResponse

router = APIRouter(prefix="/adventurers", tags=["events"])


@router.get("/{adventurer_id}/events", response_model=list[EventResponse])
def list_adventurer_events(
    adventurer_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """List progression events for an adventurer, newest first."""
    load_adventurer(db, adventurer_id)
    return service.get_events(db, adventurer_id, skip, limit)
