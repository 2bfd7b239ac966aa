"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - PlayerId wraps a positive int - storage assigns it, clients never do
    - Race, Profession and PlayerOrder are closed sets; values equal member names
      so they round-trip through JSON and query strings unchanged

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PlayerId = NewType("PlayerId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Race(str, Enum):
    """Playable races."""
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    """Playable professions."""
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, Enum):
    """Sort keys accepted by the list endpoint. Value is the attribute name on Player."""
    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        return self.value.lower()
