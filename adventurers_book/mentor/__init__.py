from .router import router
from .directory import MentorDirectory, MentorProfile, get_mentor_directory
from .schemas import MentorResponse

__all__ = [
    "router",
    "MentorDirectory",
    "MentorProfile",
    "get_mentor_directory",
    "MentorResponse",
]
