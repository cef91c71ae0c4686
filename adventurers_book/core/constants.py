"""
Hard limits on stored progression values.

XP columns are 64-bit; these caps keep every stored total well inside that
range and keep a single award from describing an absurd number of levels.
"""

# Largest XP total (and largest single award) an adventurer or skill may hold.
MAX_EXPERIENCE_POINTS: int = 10**15

# Largest level an administrator may assign directly.
MAX_LEVEL: int = 1_000_000
