"""Player Validation - field-level rules for creation and partial update.

Invariants:
    - Pure: returns FieldViolation | None, never raises, never mutates input
    - Creation requires all six fields; a patch checks only the fields it carries
    - Fields are checked in FIELD_ORDER; the first failure is reported
    - A patch is judged as a whole before anything is applied (all-or-nothing update)
    - Birthday bounds are exclusive on both ends

Design Decisions:
    - Candidates are plain mappings (field name -> typed value) so the same rules
      serve the HTTP schemas and direct service callers
    - None in a patch means "not supplied", matching a JSON null
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from app.core.domain_types import PlayerId
from app.core.timestamps import ensure_utc


MAX_NAME_LENGTH: int = 12
MAX_TITLE_LENGTH: int = 30
MIN_EXPERIENCE: int = 0
MAX_EXPERIENCE: int = 10_000_000
BIRTHDAY_AFTER = datetime(2000, 1, 1, tzinfo=timezone.utc)
BIRTHDAY_BEFORE = datetime(3000, 1, 1, tzinfo=timezone.utc)
MAX_PLAYER_ID: int = 2**63 - 1

FIELD_ORDER: tuple[str, ...] = (
    "name", "title", "race", "profession", "birthday", "experience",
)
PATCHABLE_FIELDS: tuple[str, ...] = FIELD_ORDER + ("banned",)

_PLAYER_ID_PATTERN = re.compile(r"[1-9][0-9]*")


@dataclass(frozen=True)
class FieldViolation:
    """Which field failed and why."""
    field: str
    message: str


def check_name(name: str | None) -> FieldViolation | None:
    if not name or len(name) > MAX_NAME_LENGTH:
        return FieldViolation(
            "name", f"name must be 1-{MAX_NAME_LENGTH} characters",
        )
    return None


def check_title(title: str | None) -> FieldViolation | None:
    if not title or len(title) > MAX_TITLE_LENGTH:
        return FieldViolation(
            "title", f"title must be 1-{MAX_TITLE_LENGTH} characters",
        )
    return None


def check_experience(experience: int | None) -> FieldViolation | None:
    if experience is None or not MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE:
        return FieldViolation(
            "experience",
            f"experience must be between {MIN_EXPERIENCE} and {MAX_EXPERIENCE}",
        )
    return None


def check_birthday(birthday: datetime | None) -> FieldViolation | None:
    if birthday is None or not (
        BIRTHDAY_AFTER < ensure_utc(birthday) < BIRTHDAY_BEFORE
    ):
        return FieldViolation(
            "birthday", "birthday must fall after year 2000 began and before year 3000",
        )
    return None


def _check_present(field: str) -> Callable[[Any], FieldViolation | None]:
    def check(value: Any) -> FieldViolation | None:
        if value is None:
            return FieldViolation(field, f"{field} is required")
        return None
    return check


_RULES: dict[str, Callable[[Any], FieldViolation | None]] = {
    "name": check_name,
    "title": check_title,
    "race": _check_present("race"),
    "profession": _check_present("profession"),
    "birthday": check_birthday,
    "experience": check_experience,
}


def validate_new_player(candidate: Mapping[str, Any]) -> FieldViolation | None:
    """Creation check: every rule must hold, missing fields included."""
    for field in FIELD_ORDER:
        violation = _RULES[field](candidate.get(field))
        if violation:
            return violation
    return None


def validate_player_patch(patch: Mapping[str, Any]) -> FieldViolation | None:
    """Update check: only fields present (and not None) in the patch are judged."""
    for field in FIELD_ORDER:
        value = patch.get(field)
        if value is None:
            continue
        violation = _RULES[field](value)
        if violation:
            return violation
    return None


def parse_player_id(raw_id: str | None) -> PlayerId | None:
    """Boundary identifier to PlayerId. None unless the whole string is [1-9][0-9]*."""
    if not raw_id or len(raw_id) > len(str(MAX_PLAYER_ID)):
        return None
    if not _PLAYER_ID_PATTERN.fullmatch(raw_id):
        return None
    value = int(raw_id)
    if value > MAX_PLAYER_ID:
        return None
    return PlayerId(value)


def supplied_fields(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Fields a patch actually sets: patchable names whose value is not None."""
    return {
        field: patch[field]
        for field in PATCHABLE_FIELDS
        if patch.get(field) is not None
    }
