# pagination.py
# Page/limit clamping shared by every paginated listing.

import math
from typing import Generic, List, Tuple, TypeVar

from pydantic import BaseModel

from football_backend.core.config import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

T = TypeVar("T")


def normalize_pagination(page: int, limit: int) -> Tuple[int, int]:
    """
    Clamp query values the way every list endpoint expects:
    - page < 1 becomes 1
    - limit outside [1, MAX_PAGE_LIMIT] falls back to DEFAULT_PAGE_LIMIT
    """
    if page is None or page < 1:
        page = DEFAULT_PAGE
    if limit is None or limit < 1 or limit > MAX_PAGE_LIMIT:
        limit = DEFAULT_PAGE_LIMIT
    return page, limit


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


class Page(BaseModel, Generic[T]):
    """Paginated list payload returned by list endpoints."""
    page: int
    limit: int
    total: int
    total_pages: int
    items: List[T]

    @classmethod
    def build(cls, items: List[T], total: int, page: int, limit: int) -> "Page[T]":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages(total, limit),
            items=items,
        )
