"""Player ORM - persists one player record.

Invariants:
    - id is an autoincrement integer primary key, assigned on first flush
    - level and until_next_level are derived from experience by the service layer;
      no route writes them directly
    - race/profession stored as their enum names (VARCHAR, no native DB enum)
"""

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import Profession, Race
from app.core.validate_player import MAX_NAME_LENGTH, MAX_TITLE_LENGTH
from app.db.base import Base


class Player(Base):
    """Player record - satisfies core.repository_protocols.PlayerLike."""
    __tablename__ = "player"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    race: Mapped[Race] = mapped_column(
        Enum(Race, native_enum=False, length=20), nullable=False,
    )
    profession: Mapped[Profession] = mapped_column(
        Enum(Profession, native_enum=False, length=20), nullable=False,
    )
    birthday: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    banned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    experience: Mapped[int] = mapped_column(Integer, nullable=False)
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    until_next_level: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Player id={self.id} name={self.name!r} level={self.level}>"
