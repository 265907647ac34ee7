"""Date utilities for spendlog.

Pure functions for month-key arithmetic and formatting. Every other module
goes through these instead of slicing "YYYY-MM" strings itself.
"""

from datetime import date, datetime, timedelta

from spendlog.domain.models import Month


def parse_month_key(month: Month) -> date:
    """Parse a month key into the first day of that month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Date of the first day of the month.

    Raises:
        ValueError: If the month key is malformed.
    """
    return datetime.strptime(month, "%Y-%m").date()


def format_month_key(day: date) -> Month:
    """Truncate a date to its month key (YYYY-MM)."""
    return Month(f"{day.year:04d}-{day.month:02d}")


def _first_of_next_month(month: Month) -> date:
    first = parse_month_key(month)
    try:
        return (first.replace(day=28) + timedelta(days=4)).replace(day=1)
    except OverflowError:
        raise ValueError(f"No month after {month}") from None


def start_of_month(month: Month) -> date:
    """First calendar day of the month."""
    return parse_month_key(month)


def end_of_month(month: Month) -> date:
    """Last calendar day of the month (inclusive)."""
    return _first_of_next_month(month) - timedelta(days=1)


def days_in_month(month: Month) -> int:
    """Number of days in the calendar month."""
    return end_of_month(month).day


def previous_month_key(month: Month) -> Month:
    """Month key of the calendar month immediately before this one.

    Rolls over year boundaries: 2026-01 -> 2025-12.

    Raises:
        ValueError: If the key is malformed or has no preceding month.
    """
    first = parse_month_key(month)
    try:
        return format_month_key(first - timedelta(days=1))
    except OverflowError:
        raise ValueError(f"No month before {month}") from None


def format_month_label(month: Month) -> str:
    """Human-readable month (e.g., "January 2025")."""
    return parse_month_key(month).strftime("%B %Y")


def month_range(month: Month) -> tuple[str, str, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (since_date, until_date, label) where:
        - since_date: First day of month (YYYY-MM-DD)
        - until_date: First day of next month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    since = start_of_month(month).isoformat()
    until = _first_of_next_month(month).isoformat()
    return since, until, format_month_label(month)
