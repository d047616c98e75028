"""Standardized JSON response envelope helpers."""


import math
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """Paginated list response envelope:
    `{ items: [...], totalCount, totalPages, currentPage, pageSize }`
    """

    items: list[T]
    total_count: int
    total_pages: int
    current_page: int
    page_size: int

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def paginated(items: list, total: int, page: int, page_size: int) -> dict:
    """Build a paginated response dict for use with PageResponse."""
    return {
        "items": items,
        "total_count": total,
        "total_pages": math.ceil(total / page_size) if page_size else 0,
        "current_page": page,
        "page_size": page_size,
    }
