"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Storage accessed only through PlayerRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the core functions that
      consume PlayerLike records are never async themselves
"""

from datetime import datetime
from typing import Protocol

from app.core.domain_types import PlayerId, Profession, Race


class PlayerLike(Protocol):
    """Structural contract for player records handed to the pure core.

    Satisfied by the ORM model and by plain test doubles alike.
    """
    id: int | None
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: datetime
    banned: bool
    experience: int
    level: int
    until_next_level: int


class PlayerRepository(Protocol):
    """Contract for player persistence - implemented by shell."""
    async def find_all(self) -> list[PlayerLike]: ...
    async def find_by_id(self, player_id: PlayerId) -> PlayerLike | None: ...
    async def save(self, player: PlayerLike) -> PlayerLike: ...
    async def delete(self, player: PlayerLike) -> None: ...
