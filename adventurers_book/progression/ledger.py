"""
Proficiency ledger: splits an XP award across skills.

Works on immutable snapshots so the aggregate can compute the whole outcome
before touching any persistent row.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .curve import LevelingCurve
from ..core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ProficiencyState:
    skill: str
    level: int = 1
    experience_points: int = 0


@dataclass
class Distribution:
    per_skill_delta: dict[str, int] = field(default_factory=dict)
    # New state for every skill that received XP (including newly created ones)
    states: dict[str, ProficiencyState] = field(default_factory=dict)
    leveled_skills: list[str] = field(default_factory=list)
    created_skills: list[str] = field(default_factory=list)


def distribute_xp(
    proficiencies: Sequence[ProficiencyState],
    total_xp: int,
    target_skills: Iterable[str] | None,
    curve: LevelingCurve,
) -> Distribution:
    """
    Split ``total_xp`` evenly across the target skills, or across every current
    proficiency when no targets are given.

    - Target names are de-duplicated, first occurrence wins.
    - Unknown targets are created at level 1 with 0 XP before the split.
    - The remainder of an uneven split goes to the first recipient. Each call
      rounds on its own, so uneven splits do not add up like one combined award.
    - With no targets and no proficiencies nothing is distributed.
    """
    if total_xp < 0:
        raise InvalidArgumentError(f"XP award must be non-negative, got {total_xp}")

    current = {p.skill: p for p in proficiencies}
    targets = list(dict.fromkeys(target_skills or []))
    distribution = Distribution()

    if targets:
        for skill in targets:
            if skill not in current:
                current[skill] = ProficiencyState(skill=skill)
                distribution.created_skills.append(skill)
        recipients = targets
    else:
        recipients = [p.skill for p in proficiencies]

    if not recipients:
        return distribution

    share, remainder = divmod(total_xp, len(recipients))
    for index, skill in enumerate(recipients):
        delta = share + remainder if index == 0 else share
        state = current[skill]
        applied = curve.advance(state.level, state.experience_points, delta)

        distribution.per_skill_delta[skill] = delta
        distribution.states[skill] = ProficiencyState(
            skill=skill,
            level=applied.new_level,
            experience_points=state.experience_points + delta,
        )
        if applied.levels_gained:
            distribution.leveled_skills.append(skill)

    return distribution
