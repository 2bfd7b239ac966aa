"""Player Repository - SQLAlchemy implementation of core PlayerRepository.

Invariants:
    - find_all returns players in storage-native order (ascending id)
    - save commits and refreshes, so the returned player carries its assigned id
    - One repository per request-scoped AsyncSession; no state of its own
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import PlayerId
from app.models.player import Player

logger = logging.getLogger(__name__)


class SqlAlchemyPlayerRepository:
    """Async player storage over a single AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Player]:
        result = await self.db.execute(select(Player).order_by(Player.id))
        return list(result.scalars().all())

    async def find_by_id(self, player_id: PlayerId) -> Player | None:
        return await self.db.get(Player, player_id)

    async def save(self, player: Player) -> Player:
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)
        logger.debug("Player saved", extra={"player_id": player.id})
        return player

    async def delete(self, player: Player) -> None:
        await self.db.delete(player)
        await self.db.commit()
