"""Calendar helpers for month-based windows."""

from datetime import date

from dateutil.relativedelta import relativedelta


def beginning_of_month(value: date) -> date:
    """Return the first day of the month containing ``value``."""
    return value.replace(day=1)


def end_of_month(value: date) -> date:
    """Return the last day of the month containing ``value``."""
    return beginning_of_month(value) + relativedelta(months=1, days=-1)


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping to shorter month ends.

    Args:
        value: Anchor date.
        months: Number of months to add (negative to go back).

    Returns:
        date: Shifted date; Jan 31 plus one month is Feb 28 (or 29).
    """
    return value + relativedelta(months=months)


def truncate_date(value: date, interval: str) -> date:
    """Truncate a date to the start of its interval bucket.

    Args:
        value: Date to truncate.
        interval: One of ``day``, ``week``, ``month``, ``quarter``, ``year``.

    Returns:
        date: First day of the bucket (weeks start on Monday).

    Raises:
        ValueError: If the interval is unknown.
    """
    if interval == "day":
        return value
    if interval == "week":
        return value - relativedelta(days=value.weekday())
    if interval == "month":
        return beginning_of_month(value)
    if interval == "quarter":
        start_month = ((value.month - 1) // 3) * 3 + 1
        return date(value.year, start_month, 1)
    if interval == "year":
        return date(value.year, 1, 1)
    raise ValueError(f"Unsupported interval: {interval}")


def format_long_date(value: date) -> str:
    """Format a date for chart labels, e.g. ``January 05, 2025``."""
    return value.strftime("%B %d, %Y")


__all__ = [
    "beginning_of_month",
    "end_of_month",
    "add_months",
    "truncate_date",
    "format_long_date",
]
