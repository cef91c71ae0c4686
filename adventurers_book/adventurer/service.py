"""
Adventurer aggregate operations.

Every mutation runs under the per-adventurer lock, loads the aggregate,
applies the change to all derived fields (level, proficiency levels, avatar
level, mentor session count), stages its events, and commits once. Any
failure rolls the whole session back.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy.orm import Session

from .models import (
    Adventurer,
    Proficiency,
    MentorAssignment,
    GuidanceSession,
    ADVENTURER_CURVE,
    PROFICIENCY_CURVE,
)
from .repository import load_adventurer, save_adventurer, list_adventurers
from .schemas import (
    AdventurerCreate,
    AdventurerUpdate,
    AddExperienceRequest,
    AssignMentorRequest,
    GuidanceSessionCreate,
)
from ..core.constants import MAX_EXPERIENCE_POINTS
from ..core.exceptions import GameException, NotFoundError, InvalidArgumentError, PreconditionFailedError
from ..core.locks import adventurer_locks
from ..event import service as event_service
from ..mentor.directory import MentorDirectory
from ..progression import Distribution, XpApplication, distribute_xp, compute_avatar_level

logger = logging.getLogger("adventurers-book.adventurer")


@dataclass
class ExperienceOutcome:
    old_level: int
    applied: XpApplication
    distribution: Distribution

    @property
    def level_up_occurred(self) -> bool:
        return self.applied.levels_gained > 0


def _now() -> int:
    return int(time.time())


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def _touch(adventurer: Adventurer, now: int) -> None:
    adventurer.updated_at = max(now, adventurer.updated_at or now)


def _refresh_avatar_level(adventurer: Adventurer) -> None:
    adventurer.universal_avatar_level = compute_avatar_level(p.level for p in adventurer.proficiencies)


def _ensure_proficiencies(adventurer: Adventurer, skills: Iterable[str]) -> list[str]:
    """Add missing skills at level 1 with no XP. Returns the names that were added."""
    added = []
    for skill in dict.fromkeys(skills):
        if adventurer.get_proficiency(skill) is None:
            adventurer.proficiencies.append(Proficiency(skill=skill, level=1, experience_points=0))
            added.append(skill)
    return added


@contextmanager
def _atomic(db: Session, adventurer_id: str):
    with adventurer_locks.hold(adventurer_id):
        try:
            yield
        except GameException:
            db.rollback()
            raise
        except Exception:
            db.rollback()
            logger.warning(f"Rolled back failed change to adventurer {adventurer_id}", exc_info=True)
            raise


def _award_experience(
    db: Session,
    adventurer: Adventurer,
    amount: int,
    target_skills: Iterable[str] | None,
    reason: str | None,
    now: int,
) -> ExperienceOutcome:
    """Apply one XP award to both the adventurer track and the proficiency ledger."""
    old_level = adventurer.level
    if adventurer.experience_points + amount > MAX_EXPERIENCE_POINTS:
        raise InvalidArgumentError(
            f"Award of {amount} XP would take adventurer '{adventurer.id}' past {MAX_EXPERIENCE_POINTS} XP"
        )
    applied = ADVENTURER_CURVE.advance(adventurer.level, adventurer.experience_points, amount)
    distribution = distribute_xp(adventurer.proficiency_states(), amount, target_skills, PROFICIENCY_CURVE)
    for skill, state in distribution.states.items():
        if state.experience_points > MAX_EXPERIENCE_POINTS:
            raise InvalidArgumentError(f"Award of {amount} XP would take skill '{skill}' past {MAX_EXPERIENCE_POINTS} XP")

    adventurer.level = applied.new_level
    adventurer.experience_points += amount
    _ensure_proficiencies(adventurer, distribution.created_skills)
    for skill, state in distribution.states.items():
        proficiency = adventurer.get_proficiency(skill)
        proficiency.level = state.level
        proficiency.experience_points = state.experience_points
    _refresh_avatar_level(adventurer)
    _touch(adventurer, now)

    event_service.log_experience_awarded(db, adventurer.id, now, amount, reason, distribution.per_skill_delta)
    if applied.levels_gained:
        event_service.log_level_up(db, adventurer.id, now, old_level, applied.new_level)
        logger.info(f"Adventurer {adventurer.id} leveled up {old_level} -> {applied.new_level}")
    for skill in distribution.leveled_skills:
        event_service.log_proficiency_level_up(db, adventurer.id, now, skill, distribution.states[skill].level)

    return ExperienceOutcome(old_level=old_level, applied=applied, distribution=distribution)


def get_adventurer(db: Session, adventurer_id: str) -> Adventurer:
    return load_adventurer(db, adventurer_id)


def get_adventurers(db: Session, skip: int = 0, limit: int = 100) -> dict:
    items, total = list_adventurers(db, skip, limit)
    return {"items": items, "total": total}


def create_adventurer(db: Session, adventurer_data: AdventurerCreate) -> Adventurer:
    """Create an adventurer. Starting XP lifts the level to where the curve puts it, never lower."""
    adventurer_id = _new_id("adv")
    now = _now()
    level = max(adventurer_data.level, ADVENTURER_CURVE.level_for_xp(adventurer_data.experience_points))
    with _atomic(db, adventurer_id):
        adventurer = Adventurer(
            id=adventurer_id,
            name=adventurer_data.name,
            level=level,
            experience_points=adventurer_data.experience_points,
            deleted=False,
            created_at=now,
            updated_at=now,
        )
        _ensure_proficiencies(adventurer, adventurer_data.proficiencies)
        _refresh_avatar_level(adventurer)
        db.add(adventurer)
        db.flush()
        event_service.log_created(db, adventurer_id, now, adventurer.name)
        adventurer = save_adventurer(db, adventurer)
    logger.info(f"Created adventurer {adventurer_id} ({adventurer.name})")
    return adventurer


def update_adventurer(db: Session, adventurer_id: str, adventurer_data: AdventurerUpdate) -> Adventurer:
    """Administrative partial update. Level and XP are written as given, without the curve."""
    with _atomic(db, adventurer_id):
        adventurer = load_adventurer(db, adventurer_id)
        update_data = adventurer_data.model_dump(exclude_unset=True, exclude_none=True)
        skills = update_data.pop("proficiencies", [])
        for field, value in update_data.items():
            setattr(adventurer, field, value)
        added = _ensure_proficiencies(adventurer, skills)
        _refresh_avatar_level(adventurer)

        now = _now()
        _touch(adventurer, now)
        event_service.log_updated(db, adventurer_id, now, {**update_data, "proficiencies_added": added})
        adventurer = save_adventurer(db, adventurer)
    return adventurer


def delete_adventurer(db: Session, adventurer_id: str) -> dict:
    with _atomic(db, adventurer_id):
        adventurer = load_adventurer(db, adventurer_id)
        adventurer.deleted = True
        now = _now()
        _touch(adventurer, now)
        event_service.log_deleted(db, adventurer_id, now)
        save_adventurer(db, adventurer)
    logger.info(f"Deleted adventurer {adventurer_id}")
    return {"id": adventurer_id, "deleted": True}


# Experience
def add_experience(db: Session, adventurer_id: str, award: AddExperienceRequest) -> dict:
    with _atomic(db, adventurer_id):
        adventurer = load_adventurer(db, adventurer_id)
        outcome = _award_experience(
            db,
            adventurer,
            award.experience_points,
            award.target_proficiencies,
            award.reason,
            _now(),
        )
        adventurer = save_adventurer(db, adventurer)

    return {
        "adventurer": adventurer,
        "level_up_occurred": outcome.level_up_occurred,
        "new_level": adventurer.level if outcome.level_up_occurred else None,
        "levels_gained": outcome.applied.levels_gained,
        "affected_proficiencies": outcome.distribution.leveled_skills,
        "experience_distribution": outcome.distribution.per_skill_delta,
    }


# Mentors
def get_mentor(db: Session, adventurer_id: str) -> MentorAssignment:
    adventurer = load_adventurer(db, adventurer_id)
    if adventurer.mentor is None:
        raise NotFoundError("Mentor assignment for adventurer", adventurer_id)
    return adventurer.mentor


def assign_mentor(
    db: Session,
    adventurer_id: str,
    request: AssignMentorRequest,
    directory: MentorDirectory,
) -> MentorAssignment:
    """Replace the current mentor assignment. Reassigning the same mentor starts a fresh engagement."""
    with _atomic(db, adventurer_id):
        adventurer = load_adventurer(db, adventurer_id)
        profile = directory.lookup_mentor(request.mentor_id)

        now = _now()
        for previous in adventurer.mentor_assignments:
            previous.active = False
        assignment = MentorAssignment(
            mentor_id=profile.id,
            mentor_name=profile.name,
            specialties=list(profile.specialties),
            assigned_at=now,
            active=True,
        )
        adventurer.mentor_assignments.append(assignment)
        _touch(adventurer, now)
        event_service.log_mentor_assigned(db, adventurer_id, now, profile.id)
        save_adventurer(db, adventurer)
        db.refresh(assignment)
    logger.info(f"Assigned mentor {profile.id} to adventurer {adventurer_id}")
    return assignment


def record_guidance_session(db: Session, adventurer_id: str, session_data: GuidanceSessionCreate) -> GuidanceSession:
    with _atomic(db, adventurer_id):
        adventurer = load_adventurer(db, adventurer_id)
        assignment = adventurer.mentor
        if assignment is None:
            raise PreconditionFailedError(f"Adventurer '{adventurer_id}' has no mentor assigned")

        now = _now()
        skills = list(dict.fromkeys(session_data.skills_focused))
        experience_gained = session_data.experience_points or 0
        if session_data.experience_points is not None:
            _award_experience(
                db,
                adventurer,
                experience_gained,
                skills,
                f"{session_data.session_type.value} session with {assignment.mentor_name}",
                now,
            )
        else:
            _ensure_proficiencies(adventurer, skills)
            _refresh_avatar_level(adventurer)
            _touch(adventurer, now)

        session = GuidanceSession(
            id=_new_id("gs"),
            sequence=len(adventurer.guidance_sessions) + 1,
            mentor_id=assignment.mentor_id,
            session_type=session_data.session_type,
            duration_minutes=session_data.duration_minutes,
            notes=session_data.notes,
            skills_focused=skills,
            experience_gained=experience_gained,
            recorded_at=now,
        )
        session.assignment = assignment
        adventurer.guidance_sessions.append(session)
        event_service.log_guidance_recorded(db, adventurer_id, now, session.id, assignment.mentor_id, session.notes)
        save_adventurer(db, adventurer)
        db.refresh(session)
    logger.info(
        f"Recorded {session.session_type.value} session {session.id} for adventurer {adventurer_id} "
        f"({experience_gained} XP)"
    )
    return session


def get_guidance_sessions(db: Session, adventurer_id: str) -> list[GuidanceSession]:
    adventurer = load_adventurer(db, adventurer_id)
    return list(adventurer.guidance_sessions)
