"""Player Schemas - wire format for player bodies.

Invariants:
    - Every request field is optional at this layer; required-ness is a core rule
    - id, level and untilNextLevel in request bodies are ignored (never client-settable)
    - birthday travels as epoch milliseconds (UTC) in both directions
    - Response keys are camelCase (untilNextLevel)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import Profession, Race
from app.core.repository_protocols import PlayerLike
from app.core.timestamps import from_epoch_millis, to_epoch_millis


class PlayerCreate(BaseModel):
    """Player creation body."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    birthday: datetime | None = None
    banned: bool | None = None
    experience: int | None = None

    @field_validator("birthday", mode="before")
    @classmethod
    def birthday_from_millis(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError("birthday must be epoch milliseconds")
        converted = from_epoch_millis(v)
        if converted is None:
            raise ValueError("birthday is out of range")
        return converted

    def to_fields(self) -> dict[str, Any]:
        """Supplied fields only; a JSON null counts as not supplied."""
        return self.model_dump(exclude_none=True)


class PlayerUpdate(PlayerCreate):
    """Partial update body - same fields as creation, all optional."""


class PlayerResponse(BaseModel):
    """Player as returned by every endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int = Field(description="Epoch milliseconds, UTC")
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(alias="untilNextLevel")

    @classmethod
    def from_model(cls, player: PlayerLike) -> "PlayerResponse":
        return cls(
            id=player.id,
            name=player.name,
            title=player.title,
            race=player.race,
            profession=player.profession,
            birthday=to_epoch_millis(player.birthday),
            banned=player.banned,
            experience=player.experience,
            level=player.level,
            until_next_level=player.until_next_level,
        )
