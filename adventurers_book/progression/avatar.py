from typing import Iterable


def compute_avatar_level(levels: Iterable[int]) -> int:
    """Universal Avatar Level: floor of the mean proficiency level, never below 1."""
    levels = list(levels)
    if not levels:
        return 1
    return max(1, sum(levels) // len(levels))
