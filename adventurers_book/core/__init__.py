from .enums import SessionType, EventType
from .exceptions import (
    GameException,
    NotFoundError,
    InvalidArgumentError,
    PreconditionFailedError,
    ConflictError,
)
from .locks import AggregateLockTable, adventurer_locks
from .constants import MAX_EXPERIENCE_POINTS, MAX_LEVEL

__all__ = [
    "SessionType",
    "EventType",
    "GameException",
    "NotFoundError",
    "InvalidArgumentError",
    "PreconditionFailedError",
    "ConflictError",
    "AggregateLockTable",
    "adventurer_locks",
    "MAX_EXPERIENCE_POINTS",
    "MAX_LEVEL",
]
