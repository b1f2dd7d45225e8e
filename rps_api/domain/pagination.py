"""Offset pagination arithmetic for the round history.

Nothing here raises for out-of-range input: page numbers and sizes are
defaulted or clamped into the valid range.
"""

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageWindow:
    page: int
    page_size: int
    total_pages: int
    total_count: int
    has_previous: bool
    has_next: bool

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def normalize_page(page: int | None) -> int:
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def normalize_page_size(page_size: int | None) -> int:
    if page_size is None or page_size < 1:
        return DEFAULT_PAGE_SIZE
    return min(page_size, MAX_PAGE_SIZE)


def resolve_page_window(page: int | None, page_size: int | None, total_count: int) -> PageWindow:
    """Work out which slice of the history a request maps to.

    An empty history always yields page 1 of 1. Otherwise a page past the
    end is clamped down to the last page.

    Args:
        page (int | None): Requested 1-based page number
        page_size (int | None): Requested number of items per page
        total_count (int): Number of stored rounds

    Returns:
        PageWindow: Effective page, size and navigation flags
    """
    page_size = normalize_page_size(page_size)

    if total_count <= 0:
        return PageWindow(
            page=DEFAULT_PAGE,
            page_size=page_size,
            total_pages=1,
            total_count=0,
            has_previous=False,
            has_next=False,
        )

    total_pages = math.ceil(total_count / page_size)
    page = min(normalize_page(page), total_pages)
    return PageWindow(
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_count=total_count,
        has_previous=page > 1,
        has_next=page < total_pages,
    )
