from enum import Enum


class SessionType(str, Enum):
    TRAINING = "training"
    MENTORING = "mentoring"
    MISSION = "mission"
    ASSESSMENT = "assessment"


class EventType(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    EXPERIENCE_AWARDED = "experience_awarded"
    LEVEL_UP = "level_up"
    PROFICIENCY_LEVEL_UP = "proficiency_level_up"
    MENTOR_ASSIGNED = "mentor_assigned"
    GUIDANCE_RECORDED = "guidance_recorded"
