"""Player Sort - ordering by each key and stability on ties."""

from datetime import datetime, timezone

from app.core.domain_types import PlayerOrder
from app.core.sort_players import sort_players


def test_no_order_keeps_input_order(make_player):
    players = [make_player(name="C"), make_player(name="A"), make_player(name="B")]
    assert sort_players(players) == players
    assert sort_players(players) is not players


def test_sort_by_each_key(make_player):
    a = make_player(id=3, name="Bilbo", experience=300,
                    birthday=datetime(2003, 1, 1, tzinfo=timezone.utc))
    b = make_player(id=1, name="Arwen", experience=5_000,
                    birthday=datetime(2001, 1, 1, tzinfo=timezone.utc))
    c = make_player(id=2, name="Celeborn", experience=0,
                    birthday=datetime(2002, 1, 1, tzinfo=timezone.utc))
    players = [a, b, c]
    assert sort_players(players, PlayerOrder.ID) == [b, c, a]
    assert sort_players(players, PlayerOrder.NAME) == [b, a, c]
    assert sort_players(players, PlayerOrder.EXPERIENCE) == [c, a, b]
    assert sort_players(players, PlayerOrder.LEVEL) == [c, a, b]
    assert sort_players(players, PlayerOrder.BIRTHDAY) == [b, c, a]


def test_sort_is_stable_on_equal_keys(make_player):
    first = make_player(name="Twin", experience=100)
    other = make_player(name="Alpha", experience=5_000)
    second = make_player(name="Twin", experience=150)
    assert sort_players([first, other, second], PlayerOrder.NAME) == [other, first, second]
    assert sort_players([second, other, first], PlayerOrder.NAME) == [other, second, first]
    assert sort_players([first, second, other], PlayerOrder.LEVEL) == [first, second, other]


def test_sort_by_birthday_mixes_naive_and_aware(make_player):
    naive = make_player(birthday=datetime(2005, 1, 1))
    aware = make_player(birthday=datetime(2004, 1, 1, tzinfo=timezone.utc))
    assert sort_players([naive, aware], PlayerOrder.BIRTHDAY) == [aware, naive]


def test_name_order_uses_utf16_code_units(make_player):
    # U+1F600 is a surrogate pair (D83D DE00), below U+FFFD in UTF-16
    emoji = make_player(name="\U0001F600")
    replacement = make_player(name="\uFFFD")
    plain = make_player(name="Z")
    assert sort_players([replacement, emoji, plain], PlayerOrder.NAME) == [
        plain, emoji, replacement,
    ]
