"""Player Validation - tests for creation, patch and identifier rules.

Tests cover:
    - Name/title length limits (empty, at limit, over limit)
    - Experience inclusive bounds
    - Birthday exclusive bounds
    - Creation requires all six fields; first failing field is reported
    - Patch judges only supplied fields
    - parse_player_id accepts [1-9][0-9]* only
"""

from datetime import datetime, timedelta, timezone

from app.core.domain_types import Profession, Race
from app.core.validate_player import (
    BIRTHDAY_AFTER,
    BIRTHDAY_BEFORE,
    FieldViolation,
    MAX_PLAYER_ID,
    check_birthday,
    check_experience,
    check_name,
    check_title,
    parse_player_id,
    supplied_fields,
    validate_new_player,
    validate_player_patch,
)


def _candidate(**overrides) -> dict:
    fields = {
        "name": "Legolas",
        "title": "Prince of Mirkwood",
        "race": Race.ELF,
        "profession": Profession.ROGUE,
        "birthday": datetime(2005, 3, 1, tzinfo=timezone.utc),
        "experience": 1500,
    }
    fields.update(overrides)
    return fields


# ─── field rules ─────────────────────────────────────────────────

def test_name_limits():
    assert check_name("a" * 12) is None
    assert check_name("a") is None
    assert check_name("a" * 13).field == "name"
    assert check_name("").field == "name"
    assert check_name(None).field == "name"


def test_title_limits():
    assert check_title("t" * 30) is None
    assert check_title("t" * 31).field == "title"
    assert check_title("") is not None


def test_experience_bounds_are_inclusive():
    assert check_experience(0) is None
    assert check_experience(10_000_000) is None
    assert check_experience(-1).field == "experience"
    assert check_experience(10_000_001).field == "experience"
    assert check_experience(None) is not None


def test_birthday_bounds_are_exclusive():
    assert check_birthday(BIRTHDAY_AFTER) is not None
    assert check_birthday(BIRTHDAY_BEFORE) is not None
    assert check_birthday(BIRTHDAY_AFTER + timedelta(milliseconds=1)) is None
    assert check_birthday(BIRTHDAY_BEFORE - timedelta(milliseconds=1)) is None
    assert check_birthday(datetime(1999, 12, 31, tzinfo=timezone.utc)) is not None


def test_naive_birthday_is_read_as_utc():
    assert check_birthday(datetime(2000, 1, 1)) is not None
    assert check_birthday(datetime(2000, 1, 1, 0, 0, 1)) is None


# ─── validate_new_player ─────────────────────────────────────────

def test_complete_candidate_is_valid():
    assert validate_new_player(_candidate()) is None


def test_long_title_is_creation_invalid():
    violation = validate_new_player(_candidate(name="ab", title="x" * 31))
    assert violation == FieldViolation(
        "title", "title must be 1-30 characters",
    )


def test_each_missing_field_is_reported():
    for field in ("name", "title", "race", "profession", "birthday", "experience"):
        candidate = _candidate()
        del candidate[field]
        violation = validate_new_player(candidate)
        assert violation is not None
        assert violation.field == field


def test_banned_is_optional_on_creation():
    assert "banned" not in _candidate()
    assert validate_new_player(_candidate()) is None


def test_first_failing_field_wins():
    violation = validate_new_player(_candidate(name="", experience=-5))
    assert violation.field == "name"


# ─── validate_player_patch ───────────────────────────────────────

def test_empty_patch_is_valid():
    assert validate_player_patch({}) is None


def test_patch_ignores_absent_and_none_fields():
    assert validate_player_patch({"name": None, "experience": 50}) is None


def test_patch_rejects_any_invalid_supplied_field():
    violation = validate_player_patch({"name": "Gimli", "experience": -1})
    assert violation.field == "experience"


def test_supplied_fields_drops_none_and_unknown_keys():
    patch = {"name": "Gimli", "title": None, "level": 99, "banned": False}
    assert supplied_fields(patch) == {"name": "Gimli", "banned": False}


# ─── parse_player_id ─────────────────────────────────────────────

def test_parse_player_id_accepts_positive_integers():
    assert parse_player_id("1") == 1
    assert parse_player_id("420") == 420
    assert parse_player_id(str(MAX_PLAYER_ID)) == MAX_PLAYER_ID


def test_parse_player_id_rejects_malformed_strings():
    for raw in ("", "0", "01", "-1", "1.5", "abc", " 1", "1 ", "+1", "١٢"):
        assert parse_player_id(raw) is None, raw


def test_parse_player_id_rejects_values_beyond_64_bits():
    assert parse_player_id(str(MAX_PLAYER_ID + 1)) is None
    assert parse_player_id("9" * 5000) is None


def test_parse_player_id_rejects_none():
    assert parse_player_id(None) is None
