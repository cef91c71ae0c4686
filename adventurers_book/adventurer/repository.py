"""
Persistence seam for the adventurer aggregate.

``load_adventurer`` / ``save_adventurer`` are the only ways the service reads
or writes a whole aggregate; swapping the store means swapping this module.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import Adventurer
from ..core.exceptions import NotFoundError, ConflictError


def load_adventurer(db: Session, adventurer_id: str) -> Adventurer:
    adventurer = (
        db.query(Adventurer)
        .filter(Adventurer.id == adventurer_id)
        .populate_existing()
        .first()
    )
    if not adventurer or adventurer.deleted:
        raise NotFoundError("Adventurer", adventurer_id)
    return adventurer


def save_adventurer(db: Session, adventurer: Adventurer) -> Adventurer:
    db.add(adventurer)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(f"Adventurer '{adventurer.id}' could not be saved: {e.orig}") from e
    db.refresh(adventurer)
    return adventurer


def list_adventurers(db: Session, skip: int = 0, limit: int = 100) -> tuple[list[Adventurer], int]:
    query = db.query(Adventurer).filter(Adventurer.deleted.is_(False))
    total = query.count()
    items = query.order_by(Adventurer.created_at, Adventurer.id).offset(skip).limit(limit).all()
    return items, total
