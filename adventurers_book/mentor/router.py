from fastapi import APIRouter, Depends

from .directory import MentorDirectory, get_mentor_directory
from .schemas import MentorResponse

router = APIRouter(prefix="/mentors", tags=["mentors"])


@router.get("/", response_model=list[MentorResponse])
def list_mentors(directory: MentorDirectory = Depends(get_mentor_directory)):
    """List every mentor known to the directory."""
    return directory.list_mentors()


@router.get("/{mentor_id}", response_model=MentorResponse)
def get_mentor(mentor_id: str, directory: MentorDirectory = Depends(get_mentor_directory)):
    """Look up a mentor by ID."""
    return directory.lookup_mentor(mentor_id)
