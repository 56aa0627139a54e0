"""Timestamp and date formatting utilities."""

from datetime import date, datetime
from typing import Optional

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def now() -> str:
    """Current local time as a filesystem-safe stamp (e.g., '20251114_123456')."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current local date as 'YYYY-MM-DD'."""
    return date.today().isoformat()


def format_month(date_str: str) -> str:
    """
    Format an ISO 'YYYY-MM' month as 'Mon YYYY'.

    Returns the input unchanged when it does not look like 'YYYY-MM', and an
    empty string for empty input.

    Examples:
        format_month("2021-03")  # "Mar 2021"
        format_month("Spring 2020")  # "Spring 2020"
    """
    if not date_str:
        return ""

    parts = date_str.split("-")
    if len(parts) < 2:
        return date_str

    year, month = parts[0], parts[1]
    try:
        month_index = int(month) - 1
    except ValueError:
        return date_str

    if not (0 <= month_index < 12) or not year.isdigit():
        return date_str

    return f"{MONTH_ABBREVIATIONS[month_index]} {year}"


def format_long_date(value: Optional[date] = None) -> str:
    """Format a date as 'October 18, 2026' (defaults to today)."""
    value = value or date.today()
    return f"{value.strftime('%B')} {value.day}, {value.year}"
