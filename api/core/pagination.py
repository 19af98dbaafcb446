"""
Cursor pagination helpers shared by the list endpoints.

Stores fetch `limit + 1` rows; the extra row only signals that another page
exists and is never returned.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from .errors import Result, ValidationFailure

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 20
MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 100

# Identifiers and cursors are bound as Postgres BIGINT parameters.
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1

_INT_RE = re.compile(r"-?[0-9]+")


@dataclass
class Page:
    items: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: str | None = None


def parse_int(raw: str | None) -> int | None:
    """
    Parse a plain base-10 integer, or return None.

    Stricter than `int()`: no underscores, no surrounding junk, ASCII digits only.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def in_bigint_range(value: int) -> bool:
    return BIGINT_MIN <= value <= BIGINT_MAX


def parse_bigint(raw: str | None) -> int | None:
    value = parse_int(raw)
    if value is None or not in_bigint_range(value):
        return None
    return value


def parse_limit(raw: str | None, *, error_message: str) -> Result[int]:
    if raw is None or not raw.strip():
        return Result.success(DEFAULT_PAGE_LIMIT)

    value = parse_int(raw)
    if value is None:
        return Result.failure(ValidationFailure(error_message))
    return Result.success(max(MIN_PAGE_LIMIT, min(value, MAX_PAGE_LIMIT)))


def parse_cursor(raw: str | None) -> int | None:
    # A malformed cursor restarts from the first page instead of failing.
    if raw is None or raw == "":
        return None
    cursor = parse_bigint(raw)
    if cursor is None:
        logger.debug("cursor_ignored raw=%r", raw)
    return cursor


def window(rows: list[dict[str, Any]], limit: int, *, key: str = "id") -> Page:
    if len(rows) <= limit:
        return Page(items=rows, next_cursor=None)

    items = rows[:limit]
    return Page(items=items, next_cursor=str(items[-1][key]))
