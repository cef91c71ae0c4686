from typing import Annotated, Literal

from pydantic import BaseModel, Field

from ..core.constants import MAX_EXPERIENCE_POINTS, MAX_LEVEL
from ..core.enums import SessionType

SkillName = Annotated[str, Field(min_length=1, max_length=50)]


class AdventurerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    proficiencies: list[SkillName] = Field(default_factory=list)
    level: int = Field(default=1, ge=1, le=MAX_LEVEL)
    experience_points: int = Field(default=0, ge=0, le=MAX_EXPERIENCE_POINTS)


class AdventurerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    level: int | None = Field(default=None, ge=1, le=MAX_LEVEL)
    experience_points: int | None = Field(default=None, ge=0, le=MAX_EXPERIENCE_POINTS)
    # Skills to add; existing proficiencies are left untouched
    proficiencies: list[SkillName] | None = None


class ProficiencyResponse(BaseModel):
    skill: str
    level: int
    experience_points: int
    experience_to_next_level: int

    class Config:
        from_attributes = True


class MentorAssignmentResponse(BaseModel):
    mentor_id: str
    mentor_name: str
    specialties: list[str]
    assigned_at: int
    sessions_completed: int

    class Config:
        from_attributes = True


class AdventurerResponse(BaseModel):
    id: str
    name: str
    level: int
    experience_points: int
    experience_to_next_level: int
    proficiencies: list[ProficiencyResponse]
    universal_avatar_level: int
    mentor: MentorAssignmentResponse | None = None
    created_at: int
    updated_at: int
    object: Literal["adventurer"] = "adventurer"

    class Config:
        from_attributes = True


class AdventurerListResponse(BaseModel):
    items: list[AdventurerResponse]
    total: int
    object: Literal["list"] = "list"


class AdventurerDeleteResponse(BaseModel):
    id: str
    deleted: bool
    object: Literal["adventurer"] = "adventurer"


class AddExperienceRequest(BaseModel):
    experience_points: int = Field(..., ge=0, le=MAX_EXPERIENCE_POINTS)
    target_proficiencies: list[SkillName] | None = None
    reason: str | None = Field(default=None, max_length=500)


class ExperienceUpdateResult(BaseModel):
    adventurer: AdventurerResponse
    level_up_occurred: bool
    new_level: int | None = None
    levels_gained: int = 0
    affected_proficiencies: list[str]
    experience_distribution: dict[str, int] = Field(default_factory=dict)


class AssignMentorRequest(BaseModel):
    mentor_id: str = Field(..., min_length=1, max_length=100)


class GuidanceSessionCreate(BaseModel):
    session_type: SessionType
    duration_minutes: int = Field(..., ge=1)
    notes: str | None = Field(default=None, max_length=2000)
    skills_focused: list[SkillName] = Field(default_factory=list)
    experience_points: int | None = Field(default=None, ge=0, le=MAX_EXPERIENCE_POINTS)


class GuidanceSessionResponse(BaseModel):
    id: str
    mentor_id: str
    session_type: SessionType
    duration_minutes: int
    notes: str | None
    skills_focused: list[str]
    experience_gained: int
    recorded_at: int
    object: Literal["guidance_session"] = "guidance_session"

    class Config:
        from_attributes = True
