"""Leveling - pure arithmetic deriving level and progress from experience.

Invariants:
    - current_level(exp) == floor((sqrt(2500 + 200 * exp) - 50) / 100)
    - until_next_level(exp, current_level(exp)) >= 0 for every valid exp
    - Neither value is ever accepted from a client; both are recomputed from experience
"""

import math


def current_level(experience: int) -> int:
    """Level reached with the given experience. Truncates toward zero."""
    return int((math.sqrt(2500 + 200 * experience) - 50) / 100)


def until_next_level(experience: int, level: int) -> int:
    """Experience still missing to reach level + 1."""
    return 50 * (level + 1) * (level + 2) - experience


def derive_progress(experience: int) -> tuple[int, int]:
    """(level, until_next_level) for the given experience."""
    level = current_level(experience)
    return level, until_next_level(experience, level)
