"""Pagination helpers for list endpoints."""


from fastapi import Query

from supplier_api.core.config import settings


class PaginationParams:
    """FastAPI dependency for `?page=1&pageSize=10`."""

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number (1-based)"),
        page_size: int = Query(
            default=settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            alias="pageSize",
            description="Items per page",
        ),
    ):
        self.page = page
        self.page_size = page_size
