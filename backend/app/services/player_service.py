"""Player Service - list, count, create, read, update and delete players.

Invariants:
    - Identifier strings are parsed before any storage call (400 beats 404)
    - Lookup happens before patch validation (404 beats a bad patch)
    - An update validates every supplied field before touching the record;
      a rejected patch leaves the stored player unchanged
    - level/until_next_level are recomputed on create and whenever experience changes
    - No state survives between calls; each call reads through the repository

Design Decisions:
    - Full-scan filter over find_all(), then sort, then paginate, in application code
    - Errors surface as InvalidInputError / InvalidPlayerIdError / ResourceNotFoundError,
      mapped to HTTP by the global handler in api/error_handlers.py
"""

import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from app.core.domain_types import PlayerOrder
from app.core.errors import (
    InvalidInputError, InvalidPlayerIdError, ResourceNotFoundError,
)
from app.core.filter_players import PlayerCriteria, filter_players
from app.core.leveling import derive_progress
from app.core.paginate import paginate
from app.core.repository_protocols import PlayerLike, PlayerRepository
from app.core.sort_players import sort_players
from app.core.validate_player import (
    FieldViolation,
    parse_player_id,
    supplied_fields,
    validate_new_player,
    validate_player_patch,
)
from app.models.player import Player

logger = logging.getLogger(__name__)


class PlayerService:
    """Request-level player operations over a PlayerRepository."""

    def __init__(self, repository: PlayerRepository):
        self.repository = repository

    async def list_players(
        self,
        criteria: PlayerCriteria | None = None,
        order: PlayerOrder | None = None,
        page_number: int | None = None,
        page_size: int | None = None,
    ) -> list[PlayerLike]:
        """Filter, then sort, then cut one page."""
        players = filter_players(await self.repository.find_all(), criteria)
        return paginate(sort_players(players, order), page_number, page_size)

    async def count_players(self, criteria: PlayerCriteria | None = None) -> int:
        """Number of players matching criteria, ignoring pagination."""
        return len(filter_players(await self.repository.find_all(), criteria))

    async def create_player(self, candidate: Mapping[str, Any]) -> PlayerLike:
        violation = validate_new_player(candidate)
        if violation:
            _reject(violation, "create")

        experience = candidate["experience"]
        level, remaining = derive_progress(experience)
        banned = candidate.get("banned")
        player = Player(
            name=candidate["name"],
            title=candidate["title"],
            race=candidate["race"],
            profession=candidate["profession"],
            birthday=candidate["birthday"],
            banned=False if banned is None else banned,
            experience=experience,
            level=level,
            until_next_level=remaining,
        )
        saved = await self.repository.save(player)
        logger.info(f"Player created: {saved.name}", extra={"player_id": saved.id})
        return saved

    async def get_player(self, raw_id: str) -> PlayerLike:
        return await self._get_or_raise(raw_id)

    async def update_player(
        self, raw_id: str, patch: Mapping[str, Any],
    ) -> PlayerLike:
        """Apply a partial update. All supplied fields are accepted, or none are."""
        player = await self._get_or_raise(raw_id)

        violation = validate_player_patch(patch)
        if violation:
            _reject(violation, "update", player.id)

        changes = supplied_fields(patch)
        if not changes:
            return player
        for field, value in changes.items():
            setattr(player, field, value)
        if "experience" in changes:
            player.level, player.until_next_level = derive_progress(
                changes["experience"],
            )

        saved = await self.repository.save(player)
        logger.info(
            f"Player updated: {', '.join(changes)}", extra={"player_id": saved.id},
        )
        return saved

    async def delete_player(self, raw_id: str) -> None:
        player = await self._get_or_raise(raw_id)
        await self.repository.delete(player)
        logger.info("Player deleted", extra={"player_id": player.id})

    async def _get_or_raise(self, raw_id: str) -> PlayerLike:
        player_id = parse_player_id(raw_id)
        if player_id is None:
            raise InvalidPlayerIdError(raw_id)
        player = await self.repository.find_by_id(player_id)
        if player is None:
            raise ResourceNotFoundError("Player", str(player_id))
        return player


def _reject(
    violation: FieldViolation, operation: str, player_id: int | None = None,
) -> NoReturn:
    logger.info(
        f"Player {operation} rejected: {violation.message}",
        extra={"field": violation.field, "player_id": player_id},
    )
    raise InvalidInputError(violation.message, violation.field)
