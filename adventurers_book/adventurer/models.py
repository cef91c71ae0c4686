from sqlalchemy import Column, BigInteger, Integer, String, Boolean, Enum, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship

from ..config import settings
from ..database import Base
from ..core.enums import SessionType
from ..progression import LevelingCurve, ProficiencyState

# Same curve shape for both tracks, different constants per scope
ADVENTURER_CURVE = LevelingCurve(base=settings.adventurer_xp_base, exponent=settings.xp_curve_exponent)
PROFICIENCY_CURVE = LevelingCurve(base=settings.proficiency_xp_base, exponent=settings.xp_curve_exponent)


class Adventurer(Base):
    __tablename__ = "adventurers"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    level = Column(Integer, default=1, nullable=False)
    experience_points = Column(BigInteger, default=0, nullable=False)
    universal_avatar_level = Column(Integer, default=1, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False, index=True)

    # Unix seconds
    created_at = Column(Integer, nullable=False)
    updated_at = Column(Integer, nullable=False)

    # Relationships
    proficiencies = relationship(
        "Proficiency",
        back_populates="adventurer",
        cascade="all, delete-orphan",
        order_by="Proficiency.id",
        lazy="selectin",
    )
    mentor_assignments = relationship(
        "MentorAssignment",
        back_populates="adventurer",
        cascade="all, delete-orphan",
        order_by="MentorAssignment.id",
        lazy="selectin",
    )
    guidance_sessions = relationship(
        "GuidanceSession",
        back_populates="adventurer",
        cascade="all, delete-orphan",
        order_by="GuidanceSession.sequence",
    )

    @property
    def experience_to_next_level(self) -> int:
        return ADVENTURER_CURVE.progress(self.level, self.experience_points)[1]

    @property
    def mentor(self) -> "MentorAssignment | None":
        return next((a for a in self.mentor_assignments if a.active), None)

    def get_proficiency(self, skill: str) -> "Proficiency | None":
        return next((p for p in self.proficiencies if p.skill == skill), None)

    def proficiency_states(self) -> list[ProficiencyState]:
        return [p.to_state() for p in self.proficiencies]


class Proficiency(Base):
    __tablename__ = "proficiencies"
    __table_args__ = (UniqueConstraint("adventurer_id", "skill", name="uq_proficiency_skill"),)

    id = Column(Integer, primary_key=True, index=True)
    adventurer_id = Column(String(32), ForeignKey("adventurers.id"), nullable=False)
    skill = Column(String(50), nullable=False)
    level = Column(Integer, default=1, nullable=False)
    experience_points = Column(BigInteger, default=0, nullable=False)

    adventurer = relationship("Adventurer", back_populates="proficiencies")

    @property
    def experience_to_next_level(self) -> int:
        return PROFICIENCY_CURVE.progress(self.level, self.experience_points)[1]

    def to_state(self) -> ProficiencyState:
        return ProficiencyState(skill=self.skill, level=self.level, experience_points=self.experience_points)


class MentorAssignment(Base):
    __tablename__ = "mentor_assignments"

    id = Column(Integer, primary_key=True, index=True)
    adventurer_id = Column(String(32), ForeignKey("adventurers.id"), nullable=False, index=True)
    mentor_id = Column(String(100), nullable=False)
    mentor_name = Column(String(100), nullable=False)
    specialties = Column(JSON, default=list)
    assigned_at = Column(Integer, nullable=False)
    # Only the current assignment is active; replaced ones stay for history
    active = Column(Boolean, default=True, nullable=False)

    adventurer = relationship("Adventurer", back_populates="mentor_assignments")
    sessions = relationship(
        "GuidanceSession",
        back_populates="assignment",
        order_by="GuidanceSession.sequence",
        lazy="selectin",
    )

    @property
    def sessions_completed(self) -> int:
        return len(self.sessions)


class GuidanceSession(Base):
    __tablename__ = "guidance_sessions"

    id = Column(String(32), primary_key=True, index=True)
    adventurer_id = Column(String(32), ForeignKey("adventurers.id"), nullable=False, index=True)
    assignment_id = Column(Integer, ForeignKey("mentor_assignments.id"), nullable=False, index=True)
    # Position in the adventurer's session history, starting at 1
    sequence = Column(Integer, nullable=False)
    mentor_id = Column(String(100), nullable=False)
    session_type = Column(Enum(SessionType), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    notes = Column(String(2000), nullable=True)
    skills_focused = Column(JSON, default=list)
    experience_gained = Column(BigInteger, default=0, nullable=False)
    recorded_at = Column(Integer, nullable=False)

    adventurer = relationship("Adventurer", back_populates="guidance_sessions")
    assignment = relationship("MentorAssignment", back_populates="sessions")
