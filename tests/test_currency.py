"""Tests for currency formatting."""

import pytest
from decimal import Decimal

from invoicedash.utils.currency import cents_to_dollars, format_currency


class TestFormatCurrency:
    """Tests for format_currency."""

    @pytest.mark.parametrize(
        "cents,expected",
        [
            (15795, "$157.95"),
            (0, "$0.00"),
            (5, "$0.05"),
            (100, "$1.00"),
            (100626, "$1,006.26"),
            (123456789, "$1,234,567.89"),
            (-500, "-$5.00"),
        ],
    )
    def test_format_currency(self, cents, expected):
        """Test formatting of cent amounts as dollars."""
        assert format_currency(cents) == expected

    def test_format_currency_is_deterministic(self):
        """Test that the same input always yields the same output."""
        assert format_currency(44800) == format_currency(44800) == "$448.00"


class TestCentsToDollars:
    """Tests for cents_to_dollars."""

    def test_exact_conversion(self):
        """Test conversion keeps exact decimal precision."""
        assert cents_to_dollars(15795) == Decimal("157.95")
        assert cents_to_dollars(1) == Decimal("0.01")

    def test_returns_decimal(self):
        """Test conversion returns Decimal, not float."""
        assert isinstance(cents_to_dollars(666), Decimal)
