"""Utility functions for invoicedash."""

from invoicedash.utils.currency import format_currency, cents_to_dollars
from invoicedash.utils.date_format import format_date_to_local
from invoicedash.utils.pagination import (
    ITEMS_PER_PAGE,
    generate_pagination,
    page_bounds,
    total_pages,
)

__all__ = [
    "format_currency",
    "cents_to_dollars",
    "format_date_to_local",
    "ITEMS_PER_PAGE",
    "generate_pagination",
    "page_bounds",
    "total_pages",
]
