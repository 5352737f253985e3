"""Tests for pagination arithmetic."""

import pytest

from invoicedash.utils.pagination import (
    ITEMS_PER_PAGE,
    generate_pagination,
    page_bounds,
    total_pages,
)


class TestPageBounds:
    """Tests for page_bounds."""

    def test_page_size(self):
        """Test the dashboard page size."""
        assert ITEMS_PER_PAGE == 6

    @pytest.mark.parametrize(
        "page,expected",
        [(1, (0, 5)), (2, (6, 11)), (3, (12, 17)), (10, (54, 59))],
    )
    def test_bounds(self, page, expected):
        """Test inclusive start and end indices per page."""
        assert page_bounds(page) == expected

    def test_page_below_one_is_first_page(self):
        """Test that page 0 and negative pages map to the first page."""
        assert page_bounds(0) == (0, 5)
        assert page_bounds(-3) == (0, 5)

    def test_custom_page_size(self):
        """Test bounds with a different page size."""
        assert page_bounds(2, page_size=10) == (10, 19)


class TestTotalPages:
    """Tests for total_pages."""

    def test_zero_rows_is_zero_pages(self):
        """Test an empty result has no pages."""
        assert total_pages(0) == 0

    def test_missing_count_is_zero_pages(self):
        """Test a missing count defaults to 0 before dividing."""
        assert total_pages(None) == 0

    @pytest.mark.parametrize(
        "count,expected",
        [(1, 1), (6, 1), (7, 2), (12, 2), (13, 3)],
    )
    def test_rounds_up(self, count, expected):
        """Test partial pages count as a full page."""
        assert total_pages(count) == expected


class TestGeneratePagination:
    """Tests for generate_pagination."""

    def test_few_pages_shows_all(self):
        """Test all pages are listed when there are 7 or fewer."""
        assert generate_pagination(2, 5) == [1, 2, 3, 4, 5]
        assert generate_pagination(1, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_no_pages(self):
        """Test an empty listing has no page links."""
        assert generate_pagination(1, 0) == []

    def test_near_start(self):
        """Test links when the current page is among the first three."""
        assert generate_pagination(2, 10) == [1, 2, 3, "...", 9, 10]

    def test_near_end(self):
        """Test links when the current page is among the last three."""
        assert generate_pagination(9, 10) == [1, 2, "...", 8, 9, 10]

    def test_middle(self):
        """Test links when the current page is in the middle."""
        assert generate_pagination(5, 10) == [1, "...", 4, 5, 6, "...", 10]
