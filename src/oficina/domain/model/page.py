"""A single page of registry search results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

PAGE_SIZE = 10


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_count // self.page_size)


def paginate(items: list[T], page: int, page_size: int = PAGE_SIZE) -> Page[T]:
    """Slice an already-filtered, already-ordered list into one page."""
    if page < 1:
        page = 1
    start = (page - 1) * page_size
    return Page(
        items=items[start:start + page_size],
        page=page,
        page_size=page_size,
        total_count=len(items),
    )
