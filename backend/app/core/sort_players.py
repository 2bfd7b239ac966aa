"""Player Sort - stable ascending order by one of five keys.

Names compare by UTF-16 code unit, so characters outside the Basic
Multilingual Plane (surrogate pairs) sort below U+E000..U+FFFF.
"""

from collections.abc import Sequence
from typing import Any

from app.core.domain_types import PlayerOrder
from app.core.repository_protocols import PlayerLike
from app.core.timestamps import ensure_utc


def utf16_key(text: str) -> bytes:
    # big-endian UTF-16 bytes order exactly like their code units
    return text.encode("utf-16-be", "surrogatepass")


def _sort_key(order: PlayerOrder):
    if order is PlayerOrder.BIRTHDAY:
        return lambda p: ensure_utc(p.birthday)
    if order is PlayerOrder.NAME:
        return lambda p: utf16_key(p.name)

    def key(player: PlayerLike) -> Any:
        return getattr(player, order.field_name)
    return key


def sort_players(
    players: Sequence[PlayerLike], order: PlayerOrder | None = None,
) -> list[PlayerLike]:
    """Players sorted ascending by order; input order kept when order is None."""
    if order is None:
        return list(players)
    # sorted() is stable: equal keys keep their filter-output order
    return sorted(players, key=_sort_key(order))
