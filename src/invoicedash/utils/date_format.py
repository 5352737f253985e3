"""Date display utilities."""

from datetime import date, datetime
from typing import Union

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date_to_local(value: Union[date, str], locale: str = "en-US") -> str:
    """Format a date for display.

    Accepts a date/datetime or an ISO date string (YYYY-MM-DD).

    Args:
        value: Date to format
        locale: Only "en-US" ("Dec 6, 2022") and "en-GB" ("6 Dec 2022")
            are supported

    Returns:
        Formatted date string

    Raises:
        ValueError: If the string is not an ISO date or the locale is unsupported
    """
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise ValueError(f"Unable to parse date: {value}")
    elif isinstance(value, datetime):
        value = value.date()

    month = _MONTH_ABBREVIATIONS[value.month - 1]
    if locale == "en-US":
        return f"{month} {value.day}, {value.year}"
    if locale == "en-GB":
        return f"{value.day} {month} {value.year}"
    raise ValueError(f"Unsupported locale: {locale}")
