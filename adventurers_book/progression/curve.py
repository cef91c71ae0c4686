"""
Leveling curve.

XP needed to advance from level L to L + 1 is ``base * L ** exponent``.
With ``base >= 1`` and ``exponent >= 1`` the threshold is strictly increasing,
so every level is harder to clear than the one before it.

Adventurers and proficiencies each get their own curve instance (different
constants, same shape). Stored XP is always the running total for the scope;
the XP into the current level and the XP still needed are derived from
(level, total) on demand.

Cumulative XP is a power sum and is computed in closed form, and the level
for a total is found by bisection, so cost does not grow with the level.
"""

from dataclasses import dataclass
from math import comb

from ..core.exceptions import InvalidArgumentError


def _power_sum(n: int, exponent: int) -> int:
    """Return ``1**p + 2**p + ... + n**p`` exactly."""
    # (n + 1) ** (q + 1) - 1 == sum(comb(q + 1, j) * S_j for j in 0..q)
    sums = [n]
    for q in range(1, exponent + 1):
        rest = sum(comb(q + 1, j) * sums[j] for j in range(q))
        sums.append(((n + 1) ** (q + 1) - 1 - rest) // (q + 1))
    return sums[exponent]


@dataclass(frozen=True)
class XpApplication:
    new_level: int
    xp_into_level: int
    levels_gained: int


@dataclass(frozen=True)
class LevelingCurve:
    base: int
    exponent: int = 2

    def __post_init__(self):
        if self.base < 1:
            raise InvalidArgumentError(f"Curve base must be at least 1, got {self.base}")
        if self.exponent < 1:
            raise InvalidArgumentError(f"Curve exponent must be at least 1, got {self.exponent}")

    def next_level_threshold(self, level: int) -> int:
        """XP required to go from ``level`` to ``level + 1``."""
        if level < 1:
            raise InvalidArgumentError(f"Level must be at least 1, got {level}")
        return self.base * level ** self.exponent

    def cumulative_xp(self, level: int) -> int:
        """Total XP required to reach ``level`` starting from level 1 with no XP."""
        if level < 1:
            raise InvalidArgumentError(f"Level must be at least 1, got {level}")
        return self.base * _power_sum(level - 1, self.exponent)

    def level_for_xp(self, total_xp: int) -> int:
        """Level reached by earning ``total_xp`` from level 1."""
        if total_xp < 0:
            raise InvalidArgumentError(f"XP total must be non-negative, got {total_xp}")
        low, high = 1, 2
        while self.cumulative_xp(high) <= total_xp:
            low, high = high, high * 2
        # cumulative_xp(low) <= total_xp < cumulative_xp(high)
        while high - low > 1:
            middle = (low + high) // 2
            if self.cumulative_xp(middle) <= total_xp:
                low = middle
            else:
                high = middle
        return low

    def apply_xp(self, level: int, xp_into_level: int, xp_delta: int) -> XpApplication:
        """Add ``xp_delta`` on top of the current progress, rolling over as many levels as it covers."""
        if xp_delta < 0:
            raise InvalidArgumentError(f"XP award must be non-negative, got {xp_delta}")
        if xp_into_level < 0:
            raise InvalidArgumentError(f"XP into level must be non-negative, got {xp_into_level}")

        total = self.cumulative_xp(level) + xp_into_level + xp_delta
        new_level = self.level_for_xp(total)
        return XpApplication(
            new_level=new_level,
            xp_into_level=total - self.cumulative_xp(new_level),
            levels_gained=new_level - level,
        )

    def advance(self, level: int, total_xp: int, xp_delta: int) -> XpApplication:
        """Apply an award to a stored (level, total) pair.

        For a pair that sits on the curve this is ``apply_xp`` from the XP
        into the current level. An administrative override can leave the
        total below what the level implies; the award then fills that
        deficit first and only the rest counts toward the next level.
        """
        if xp_delta < 0:
            raise InvalidArgumentError(f"XP award must be non-negative, got {xp_delta}")
        floor = self.cumulative_xp(level)
        deficit = max(0, floor - total_xp)
        if xp_delta < deficit:
            return XpApplication(new_level=level, xp_into_level=0, levels_gained=0)
        return self.apply_xp(level, max(0, total_xp - floor), xp_delta - deficit)

    def progress(self, level: int, total_xp: int) -> tuple[int, int]:
        """Return (xp_into_level, xp_to_next_level) for a stored (level, total) pair."""
        xp_into_level = max(0, total_xp - self.cumulative_xp(level))
        xp_to_next_level = max(0, self.cumulative_xp(level + 1) - total_xp)
        return xp_into_level, xp_to_next_level
