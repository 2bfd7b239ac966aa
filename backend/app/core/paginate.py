"""Pagination - zero-based page slicing.

Invariants:
    - Page n of size s is items[n*s : n*s + s], clipped to the sequence end
    - A start index past the end yields an empty page, never an error
    - Negative numbers are rejected by the caller before reaching here
"""

from collections.abc import Sequence
from typing import TypeVar

DEFAULT_PAGE_NUMBER: int = 0
DEFAULT_PAGE_SIZE: int = 3

T = TypeVar("T")


def paginate(
    items: Sequence[T],
    page_number: int | None = None,
    page_size: int | None = None,
) -> list[T]:
    """Return one page of items. None falls back to the defaults."""
    number = DEFAULT_PAGE_NUMBER if page_number is None else page_number
    size = DEFAULT_PAGE_SIZE if page_size is None else page_size
    start = number * size
    return list(items[start:start + size])
