"""
Mentor directory.

Mentors are reference data owned outside this service; the aggregate only
ever sees them through ``lookup_mentor``. The default directory reads a JSON
file once and serves lookups from memory.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from ..config import settings
from ..core.exceptions import NotFoundError

logger = logging.getLogger("adventurers-book.mentor")


@dataclass(frozen=True)
class MentorProfile:
    id: str
    name: str
    specialties: list[str] = field(default_factory=list)


class MentorDirectory:
    def __init__(self, mentors: list[MentorProfile] | None = None):
        self._mentors = {m.id: m for m in mentors or []}

    @classmethod
    def from_file(cls, path: Path) -> "MentorDirectory":
        if not path.exists():
            logger.warning(f"Mentor directory file {path} not found, directory is empty")
            return cls()
        with open(path) as f:
            raw = json.load(f)["mentors"]
        return cls([
            MentorProfile(id=m["id"], name=m["name"], specialties=list(m.get("specialties", [])))
            for m in raw
        ])

    def lookup_mentor(self, mentor_id: str) -> MentorProfile:
        mentor = self._mentors.get(mentor_id)
        if mentor is None:
            raise NotFoundError("Mentor", mentor_id)
        return mentor

    def list_mentors(self) -> list[MentorProfile]:
        return list(self._mentors.values())


@lru_cache()
def get_mentor_directory() -> MentorDirectory:
    return MentorDirectory.from_file(settings.mentor_directory_path)
