from .curve import LevelingCurve, XpApplication
from .ledger import ProficiencyState, Distribution, distribute_xp
from .avatar import compute_avatar_level

__all__ = [
    "LevelingCurve",
    "XpApplication",
    "ProficiencyState",
    "Distribution",
    "distribute_xp",
    "compute_avatar_level",
]
