"""Player Filter - conjunction of optional predicates over the full record set.

Invariants:
    - Absent (None) criteria impose no constraint
    - Name/title match by case-sensitive substring containment
    - Experience and level bounds are inclusive
    - Birthday bounds are strictly exclusive on both sides
    - Output preserves input order and is always a subset of the input
"""

from collections.abc import Iterable
from dataclasses import dataclass, fields
from datetime import datetime

from app.core.domain_types import Profession, Race
from app.core.repository_protocols import PlayerLike
from app.core.timestamps import ensure_utc


@dataclass(frozen=True)
class PlayerCriteria:
    """Optional filter parameters, applied as a logical AND."""
    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    after: datetime | None = None
    before: datetime | None = None
    banned: bool | None = None
    min_experience: int | None = None
    max_experience: int | None = None
    min_level: int | None = None
    max_level: int | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


def matches(player: PlayerLike, criteria: PlayerCriteria) -> bool:
    """True if the player satisfies every supplied criterion."""
    c = criteria
    if c.name is not None and c.name not in player.name:
        return False
    if c.title is not None and c.title not in player.title:
        return False
    if c.race is not None and player.race != c.race:
        return False
    if c.profession is not None and player.profession != c.profession:
        return False
    if c.after is not None or c.before is not None:
        birthday = ensure_utc(player.birthday)
        if c.after is not None and not birthday > ensure_utc(c.after):
            return False
        if c.before is not None and not birthday < ensure_utc(c.before):
            return False
    if c.banned is not None and player.banned != c.banned:
        return False
    if c.min_experience is not None and player.experience < c.min_experience:
        return False
    if c.max_experience is not None and player.experience > c.max_experience:
        return False
    if c.min_level is not None and player.level < c.min_level:
        return False
    if c.max_level is not None and player.level > c.max_level:
        return False
    return True


def filter_players(
    players: Iterable[PlayerLike], criteria: PlayerCriteria | None = None,
) -> list[PlayerLike]:
    """Subsequence of players matching criteria, in input order."""
    if criteria is None or criteria.is_empty:
        return list(players)
    return [p for p in players if matches(p, criteria)]
