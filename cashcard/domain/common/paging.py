"""Paging and sorting primitives shared by listing endpoints.

Sort parameters follow the ``field,direction`` convention, e.g.
``sort=amount,desc``.  A bare ``field`` sorts ascending, and several
properties may share one direction: ``sort=amount,id,desc``.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")


class InvalidPageRequestError(ValueError):
    """Raised when paging or sorting parameters cannot be honoured."""


class Direction(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def lookup(cls, value: str) -> "Direction | None":
        try:
            return cls(value.lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class SortOrder:
    field: str
    direction: Direction = Direction.ASC

    @classmethod
    def parse(cls, raw: str) -> tuple["SortOrder", ...]:
        """Parse one ``sort`` value into an order per property.

        ``amount,id,desc`` applies the trailing direction to both ``amount``
        and ``id``.  When the last token is not a direction every token is a
        property and sorts ascending.
        """
        parts = [part.strip() for part in raw.split(",")]
        direction = Direction.ASC
        if len(parts) > 1:
            trailing = Direction.lookup(parts[-1])
            if trailing is not None:
                direction = trailing
                parts = parts[:-1]
            elif not parts[-1]:
                parts = parts[:-1]
        if not all(parts):
            raise InvalidPageRequestError(f"Malformed sort parameter: {raw!r}")
        return tuple(cls(part, direction) for part in parts)


def parse_sort(values: Iterable[str] | None) -> tuple[SortOrder, ...]:
    """Parse repeated ``sort`` query values, skipping empty ones."""
    if not values:
        return ()
    return tuple(order for value in values if value.strip() for order in SortOrder.parse(value))


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int
    size: int
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidPageRequestError("Page index must not be negative")
        if self.size < 1:
            raise InvalidPageRequestError("Page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(slots=True)
class Page(Generic[T]):
    """One slice of a sorted result set plus the totals behind it."""

    content: list[T]
    page: int
    size: int
    total: int
    sort: Sequence[SortOrder] = ()

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
