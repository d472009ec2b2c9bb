"""Pagination helpers shared by list endpoints."""

import math

from core.schemas.task import PaginationMeta


def build_pagination_meta(total_items: int, page: int, page_size: int) -> PaginationMeta:
    """Derive page-number pagination metadata.

    Args:
        total_items: Size of the filtered result set
        page: 1-based page number requested
        page_size: Items per page

    Returns:
        PaginationMeta where has_next_page holds iff page * page_size < total_items
    """
    total_pages = math.ceil(total_items / page_size) if total_items else 0
    return PaginationMeta(
        current_page=page,
        items_per_page=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def page_offset(page: int, page_size: int) -> int:
    """Row offset of the first item on ``page``."""
    return (page - 1) * page_size
