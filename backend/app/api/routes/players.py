"""Player Routes - REST surface for the player registry.

Invariants:
    - Paths and query parameter names are the public contract (/rest/players, camelCase params)
    - Path ids arrive as raw strings; PlayerService parses them (bad id -> 400, unknown -> 404)
    - Unknown race/profession/order values and malformed numbers fail request
      validation (400) before reaching the service
    - after/before are epoch milliseconds; both bounds exclusive
    - Successful calls return 200; delete returns an empty body
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import PlayerOrder, Profession, Race
from app.core.errors import InvalidInputError
from app.core.filter_players import PlayerCriteria
from app.core.timestamps import from_epoch_millis
from app.infrastructure.database import get_db
from app.infrastructure.player_repository import SqlAlchemyPlayerRepository
from app.schemas.player import PlayerCreate, PlayerResponse, PlayerUpdate
from app.services.player_service import PlayerService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/rest/players", tags=["players"])


def get_player_service(db: AsyncSession = Depends(get_db)) -> PlayerService:
    """Request-scoped service bound to the request's DB session."""
    return PlayerService(SqlAlchemyPlayerRepository(db))


def _millis_to_datetime(value: int | None, param: str) -> datetime | None:
    if value is None:
        return None
    converted = from_epoch_millis(value)
    if converted is None:
        raise InvalidInputError(f"{param} is out of range", param)
    return converted


def player_criteria(
    name: str | None = None,
    title: str | None = None,
    race: Race | None = None,
    profession: Profession | None = None,
    after: int | None = Query(None, description="Epoch millis, exclusive"),
    before: int | None = Query(None, description="Epoch millis, exclusive"),
    banned: bool | None = None,
    min_experience: int | None = Query(None, alias="minExperience"),
    max_experience: int | None = Query(None, alias="maxExperience"),
    min_level: int | None = Query(None, alias="minLevel"),
    max_level: int | None = Query(None, alias="maxLevel"),
) -> PlayerCriteria:
    """Shared filter parameters of the list and count endpoints."""
    return PlayerCriteria(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=_millis_to_datetime(after, "after"),
        before=_millis_to_datetime(before, "before"),
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


@router.get("", response_model=list[PlayerResponse])
async def list_players(
    criteria: PlayerCriteria = Depends(player_criteria),
    order: PlayerOrder | None = None,
    page_number: int | None = Query(None, alias="pageNumber", ge=0),
    page_size: int | None = Query(None, alias="pageSize", ge=0),
    service: PlayerService = Depends(get_player_service),
):
    """Filtered, sorted page of players."""
    players = await service.list_players(criteria, order, page_number, page_size)
    return [PlayerResponse.from_model(p) for p in players]


@router.get("/count", response_model=int)
async def count_players(
    criteria: PlayerCriteria = Depends(player_criteria),
    service: PlayerService = Depends(get_player_service),
):
    """Number of players matching the filter."""
    return await service.count_players(criteria)


@router.post("", response_model=PlayerResponse)
async def create_player(
    body: PlayerCreate,
    service: PlayerService = Depends(get_player_service),
):
    """Create a player. level/untilNextLevel are computed from experience."""
    player = await service.create_player(body.to_fields())
    return PlayerResponse.from_model(player)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(
    player_id: str, service: PlayerService = Depends(get_player_service),
):
    player = await service.get_player(player_id)
    return PlayerResponse.from_model(player)


@router.post("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: str,
    body: PlayerUpdate,
    service: PlayerService = Depends(get_player_service),
):
    """Partial update. Only supplied fields change; one bad field rejects all."""
    player = await service.update_player(player_id, body.to_fields())
    return PlayerResponse.from_model(player)


@router.delete("/{player_id}", response_class=Response)
async def delete_player(
    player_id: str, service: PlayerService = Depends(get_player_service),
):
    await service.delete_player(player_id)
    return Response(status_code=status.HTTP_200_OK)
