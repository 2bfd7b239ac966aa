"""Root conftest - shared test configuration and player factory."""

import os

# Tests never touch a real database server
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import itertools  # noqa: E402
from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402

from app.core.domain_types import Profession, Race  # noqa: E402
from app.core.leveling import derive_progress  # noqa: E402
from app.models.player import Player  # noqa: E402


@pytest.fixture
def make_player():
    """Build detached Player rows with sequential ids and derived level fields."""
    ids = itertools.count(1)

    def _make(**overrides) -> Player:
        fields = {
            "id": next(ids),
            "name": "Aragorn",
            "title": "King of Gondor",
            "race": Race.HUMAN,
            "profession": Profession.WARRIOR,
            "birthday": datetime(2010, 5, 17, tzinfo=timezone.utc),
            "banned": False,
            "experience": 100,
        }
        fields.update(overrides)
        level, remaining = derive_progress(fields["experience"])
        fields.setdefault("level", level)
        fields.setdefault("until_next_level", remaining)
        return Player(**fields)

    return _make
