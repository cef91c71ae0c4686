from .router import router
from .models import Adventurer, Proficiency, MentorAssignment, GuidanceSession
from .schemas import (
    AdventurerCreate,
    AdventurerUpdate,
    AdventurerResponse,
    AdventurerListResponse,
    AdventurerDeleteResponse,
    ProficiencyResponse,
    AddExperienceRequest,
    ExperienceUpdateResult,
    AssignMentorRequest,
    MentorAssignmentResponse,
    GuidanceSessionCreate,
    GuidanceSessionResponse,
)

__all__ = [
    "router",
    "Adventurer",
    "Proficiency",
    "MentorAssignment",
    "GuidanceSession",
    "AdventurerCreate",
    "AdventurerUpdate",
    "AdventurerResponse",
    "AdventurerListResponse",
    "AdventurerDeleteResponse",
    "ProficiencyResponse",
    "AddExperienceRequest",
    "ExperienceUpdateResult",
    "AssignMentorRequest",
    "MentorAssignmentResponse",
    "GuidanceSessionCreate",
    "GuidanceSessionResponse",
]
