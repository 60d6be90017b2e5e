"""
Parsing of list options shared by paginated endpoints.

Query-string values arrive as raw strings so that a bad value produces a
query-specific 400 message instead of a generic validation error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .db import INT8_MAX
from .errors import InvalidQueryError

DEFAULT_LIMIT = 10
ORDER_DIRECTIONS = ("asc", "desc")

_WHOLE_NUMBER = re.compile(r"[0-9]+")
_INT8_DIGITS = len(str(INT8_MAX))


@dataclass(frozen=True)
class Page:
    limit: int = DEFAULT_LIMIT
    page: int | None = None

    @property
    def offset(self) -> int | None:
        if self.page is None:
            return None
        return (self.page - 1) * self.limit


def _whole_number(raw: str | None) -> int | None:
    """
    Parse a non-negative integer that fits a bigint; None for anything else.
    """
    value = (raw or "").strip()
    if not _WHOLE_NUMBER.fullmatch(value):
        return None
    digits = value.lstrip("0") or "0"
    # checked before int() so huge inputs never hit the int-parsing digit limit
    if len(digits) > _INT8_DIGITS:
        return None
    number = int(digits)
    if number > INT8_MAX:
        return None
    return number


def parse_limit(raw: str | None, *, default: int = DEFAULT_LIMIT) -> int:
    if raw is None:
        return default
    limit = _whole_number(raw)
    if limit is None:
        raise InvalidQueryError("Invalid limit query")
    return limit


def parse_page_number(raw: str | None) -> int | None:
    if raw is None:
        return None
    page = _whole_number(raw)
    if page is None or page < 1:
        raise InvalidQueryError("Invalid page query")
    return page


def parse_page(limit: str | None, page: str | None) -> Page:
    parsed = Page(limit=parse_limit(limit), page=parse_page_number(page))
    if (parsed.offset or 0) > INT8_MAX:
        raise InvalidQueryError("Invalid page query")
    return parsed


def parse_order(raw: str | None, *, default: str = "desc") -> str:
    if raw is None:
        return default
    order = raw.strip().lower()
    if order not in ORDER_DIRECTIONS:
        raise InvalidQueryError("Invalid order query")
    return order
