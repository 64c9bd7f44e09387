"""
Page slicing over the id list returned by an ``*_ids`` search call.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

__all__ = ["page_bounds", "page_ids"]


def page_bounds(page: int, page_size: int, total_count: int) -> Optional[Tuple[int, int]]:
    """
    Return the ``[start, end)`` offsets of ``page`` (1-based).

    ``None`` means the page is past the end of the result set.
    """
    if page < 1:
        raise ValueError(f"Page numbers start at 1, got {page}")
    start = (page - 1) * page_size
    end = min(start + page_size, total_count)
    if start >= end:
        return None
    return start, end


def page_ids(ids: Sequence[str], page: int, page_size: int) -> Optional[List[str]]:
    bounds = page_bounds(page, page_size, len(ids))
    if bounds is None:
        return None
    start, end = bounds
    return list(ids[start:end])
