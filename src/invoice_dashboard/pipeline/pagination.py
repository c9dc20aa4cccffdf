"""Fixed-size pagination over the filtered view."""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from invoice_dashboard.models.common import PaginationState

PAGE_SIZE = 10

T = TypeVar("T")


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for count rows; 0 when there are none."""
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def page_slice(view: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> List[T]:
    """Return the rows of a 1-indexed page."""
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(view[start : page * page_size])


def paginate(view: Sequence[T], pagination: PaginationState) -> List[T]:
    """Record the view size on the pagination state and return its current page."""
    pagination.total = len(view)
    return page_slice(view, pagination.page, pagination.page_size)
