from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..mentor.directory import MentorDirectory, get_mentor_directory
from . import service
from .schemas import (
    AdventurerCreate,
    AdventurerUpdate,
    AdventurerResponse,
    AdventurerListResponse,
    AdventurerDeleteResponse,
    AddExperienceRequest,
    ExperienceUpdateResult,
    AssignMentorRequest,
    MentorAssignmentResponse,
    GuidanceSessionCreate,
    GuidanceSessionResponse,
)

router = APIRouter(prefix="/adventurers", tags=["adventurers"])


@router.post("/", response_model=AdventurerResponse, status_code=201)
def create_adventurer(adventurer: AdventurerCreate, db: Session = Depends(get_db)):
    """Create a new adventurer with initial attributes."""
    return service.create_adventurer(db, adventurer)


@router.get("/", response_model=AdventurerListResponse)
def list_adventurers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """List all adventurers."""
    return service.get_adventurers(db, skip, limit)


@router.get("/{adventurer_id}", response_model=AdventurerResponse)
def get_adventurer(adventurer_id: str, db: Session = Depends(get_db)):
    """Retrieve an adventurer by their ID."""
    return service.get_adventurer(db, adventurer_id)


@router.patch("/{adventurer_id}", response_model=AdventurerResponse)
def update_adventurer(adventurer_id: str, adventurer: AdventurerUpdate, db: Session = Depends(get_db)):
    """Update an adventurer's attributes."""
    return service.update_adventurer(db, adventurer_id, adventurer)


@router.delete("/{adventurer_id}", response_model=AdventurerDeleteResponse)
def delete_adventurer(adventurer_id: str, db: Session = Depends(get_db)):
    """Delete an adventurer."""
    return service.delete_adventurer(db, adventurer_id)


# Experience
@router.post("/{adventurer_id}/experience", response_model=ExperienceUpdateResult)
def add_experience(adventurer_id: str, award: AddExperienceRequest, db: Session = Depends(get_db)):
    """
    Add experience points to an adventurer, which may trigger level ups.

    The same award counts toward the adventurer's overall level and is split
    across the target proficiencies (or all proficiencies when none are given).
    """
    return service.add_experience(db, adventurer_id, award)


# Mentor
@router.post("/{adventurer_id}/mentor", response_model=MentorAssignmentResponse)
def assign_mentor(
    adventurer_id: str,
    request: AssignMentorRequest,
    db: Session = Depends(get_db),
    directory: MentorDirectory = Depends(get_mentor_directory),
):
    """Assign a mentor to an adventurer, replacing any current mentor."""
    return service.assign_mentor(db, adventurer_id, request, directory)


@router.get("/{adventurer_id}/mentor", response_model=MentorAssignmentResponse)
def get_mentor(adventurer_id: str, db: Session = Depends(get_db)):
    """Get the adventurer's current mentor assignment."""
    return service.get_mentor(db, adventurer_id)


# Guidance
@router.post("/{adventurer_id}/guidance", response_model=GuidanceSessionResponse, status_code=201)
def record_guidance_session(adventurer_id: str, session: GuidanceSessionCreate, db: Session = Depends(get_db)):
    """Record a guidance session with the current mentor."""
    return service.record_guidance_session(db, adventurer_id, session)


@router.get("/{adventurer_id}/guidance", response_model=list[GuidanceSessionResponse])
def list_guidance_sessions(adventurer_id: str, db: Session = Depends(get_db)):
    """List every guidance session the adventurer has recorded, oldest first."""
    return service.get_guidance_sessions(db, adventurer_id)
