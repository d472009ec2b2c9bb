"""Page-number pagination metadata."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class PaginationMeta(BaseSchemaModel):
    """Pagination metadata derived from total items, page and page size."""

    current_page: int = Field(..., ge=1)
    items_per_page: int = Field(..., ge=1)
    total_items: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_next_page: bool
    has_previous_page: bool
