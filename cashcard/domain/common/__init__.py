"""Shared domain helpers."""

from .paging import Direction, InvalidPageRequestError, Page, PageRequest, SortOrder, parse_sort
from .repository import AsyncRepository

__all__ = [
    "AsyncRepository",
    "Direction",
    "InvalidPageRequestError",
    "Page",
    "PageRequest",
    "SortOrder",
    "parse_sort",
]
