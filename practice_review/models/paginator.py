"""
Paginator - Bounded page slices of a sequence.
"""

from math import ceil
from typing import Sequence, TypeVar

T = TypeVar('T')


def paginate(items: Sequence[T], page: int, page_size: int) -> Sequence[T]:
    """
    Return one page of items.

    Args:
        items: Sequence to slice
        page: 1-indexed page number
        page_size: Items per page

    Returns:
        items[(page-1)*page_size : (page-1)*page_size + page_size].
        Pages past the end (or non-positive page/page_size) give an empty
        slice; keeping page valid is the caller's job.
    """
    if page < 1 or page_size < 1:
        return items[0:0]
    start = (page - 1) * page_size
    return items[start:start + page_size]


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for total items (0 when empty)."""
    if total <= 0 or page_size < 1:
        return 0
    return ceil(total / page_size)


__all__ = ['paginate', 'page_count']
