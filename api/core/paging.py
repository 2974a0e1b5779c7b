"""
Pagination and sort-parameter parsing for listing endpoints.

Sort tokens follow the `field,direction` convention, e.g.
`?sort=title,desc&sort=id,asc`. The split form `?sort=title&sort=desc`
is also accepted.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .db import BIGINT_MAX
from .errors import ValidationFailed

T = TypeVar("T")

ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)

SORT_LOC = ("query", "sort")


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: str = ASC

    @property
    def descending(self) -> bool:
        return self.direction == DESC


DEFAULT_SORT = (SortOrder("id", ASC),)


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 10
    sort: tuple[SortOrder, ...] = DEFAULT_SORT

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationFailed.single(("query", "page"), "Page index must not be less than zero")
        if self.size < 1:
            raise ValidationFailed.single(("query", "size"), "Page size must not be less than one")
        if self.size > BIGINT_MAX or self.page * self.size > BIGINT_MAX:
            raise ValidationFailed.single(("query", "page"), "Page offset is out of range")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0


def _parse_direction(raw: str) -> str:
    direction = (raw or "").strip().lower()
    if direction not in DIRECTIONS:
        raise ValidationFailed.single(
            SORT_LOC,
            f"Invalid value '{raw}' for orders given; has to be either 'desc' or 'asc' (case insensitive)",
        )
    return direction


def _checked_field(name: str, allowed: Iterable[str]) -> str:
    name = (name or "").strip()
    allowed = list(allowed)
    if name not in allowed:
        raise ValidationFailed.single(
            SORT_LOC,
            f"Cannot sort by '{name}'. Allowed: {sorted(allowed)}",
        )
    return name


def parse_sort(tokens: Sequence[str] | None, *, allowed: Iterable[str]) -> tuple[SortOrder, ...]:
    """
    Turn raw `sort` query values into ordered `SortOrder`s.

    - empty/missing -> `id,asc`
    - `["title,desc", "id,asc"]` -> each token split once, input order kept
    - `["title", "desc"]` -> split form, read as one `(field, direction)` pair
    - `["title"]` -> ascending
    """
    allowed = list(allowed)
    values = [t for t in (tokens or []) if t and t.strip()]
    if not values:
        return DEFAULT_SORT

    if "," not in values[0]:
        if len(values) > 2:
            raise ValidationFailed.single(SORT_LOC, "Expected 'field,direction' sort tokens.")
        direction = _parse_direction(values[1]) if len(values) == 2 else ASC
        return (SortOrder(_checked_field(values[0], allowed), direction),)

    orders: list[SortOrder] = []
    for token in values:
        name, _, raw_direction = token.partition(",")
        direction = _parse_direction(raw_direction) if raw_direction.strip() else ASC
        orders.append(SortOrder(_checked_field(name, allowed), direction))
    return tuple(orders)


def order_by_clause(orders: Sequence[SortOrder], columns: Mapping[str, str]) -> str:
    """
    Render an `ORDER BY` body. Only whitelisted column names ever reach SQL.

    `id ASC` is appended as a tiebreaker so page boundaries are stable.
    """
    parts: list[str] = []
    seen: set[str] = set()
    for order in orders or DEFAULT_SORT:
        column = columns[order.field]
        if column in seen:
            continue
        seen.add(column)
        parts.append(f"{column} {'DESC' if order.descending else 'ASC'}")
    if "id" not in seen:
        parts.append("id ASC")
    return ", ".join(parts)
