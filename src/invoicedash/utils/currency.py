"""Currency formatting utilities."""

from decimal import Decimal


def cents_to_dollars(amount: int) -> Decimal:
    """Convert an integer amount of cents to dollars.

    Args:
        amount: Amount in cents

    Returns:
        Exact Decimal dollar amount (e.g. 15795 -> Decimal("157.95"))
    """
    return Decimal(int(amount)) / Decimal(100)


def format_currency(amount: int) -> str:
    """Format an amount in cents as a US dollar string.

    Examples:
    - 15795 -> "$157.95"
    - 123456789 -> "$1,234,567.89"
    - 0 -> "$0.00"
    - -500 -> "-$5.00"

    Args:
        amount: Amount in cents

    Returns:
        Display string with thousands separators and two decimals
    """
    dollars = cents_to_dollars(amount)
    if dollars < 0:
        return f"-${-dollars:,.2f}"
    return f"${dollars:,.2f}"
