"""Pagination arithmetic for invoice listings."""

import math
from typing import Optional, Union

ITEMS_PER_PAGE = 6

# Page numbers plus "..." gaps, as rendered by pagination controls
PageLink = Union[int, str]
ELLIPSIS = "..."


def page_bounds(current_page: int, page_size: int = ITEMS_PER_PAGE) -> tuple[int, int]:
    """Return the inclusive zero-based (start, end) row range for a page.

    Pages below 1 are treated as page 1.

    Args:
        current_page: 1-based page number
        page_size: Rows per page

    Returns:
        Tuple of (start, end) row indices, both inclusive
    """
    page = max(int(current_page), 1)
    start = (page - 1) * page_size
    end = start + page_size - 1
    return start, end


def total_pages(count: Optional[int], page_size: int = ITEMS_PER_PAGE) -> int:
    """Return the number of pages needed for ``count`` rows.

    A missing count is defaulted to 0 before dividing, so an empty
    result has 0 pages.
    """
    return math.ceil((count or 0) / page_size)


def generate_pagination(current_page: int, total: int) -> list[PageLink]:
    """Build the list of page links shown by a pagination control.

    Examples (current page / total pages):
    - 2 / 5 -> [1, 2, 3, 4, 5]
    - 2 / 10 -> [1, 2, 3, "...", 9, 10]
    - 9 / 10 -> [1, 2, "...", 8, 9, 10]
    - 5 / 10 -> [1, "...", 4, 5, 6, "...", 10]
    """
    # Few pages: show them all
    if total <= 7:
        return list(range(1, total + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total - 1, total]

    if current_page >= total - 2:
        return [1, 2, ELLIPSIS, total - 2, total - 1, total]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total,
    ]
