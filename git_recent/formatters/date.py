"""Date and time formatting utilities."""

import time
from typing import Any, Optional


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''} ago"


def format_relative_age(timestamp: int, now: Optional[float] = None) -> str:
    """
    Format a unix timestamp as a human readable age.

    Args:
        timestamp: Unix timestamp in seconds
        now: Reference time, defaults to the current time

    Returns:
        Relative age such as "just now", "5 minutes ago" or "2 years ago"
    """
    if now is None:
        now = time.time()
    delta = int(now) - int(timestamp)

    # Commits from the future (clock skew) are treated as brand new
    if delta < 60:
        return "just now"
    if delta < 3600:
        return _plural(delta // 60, "minute")
    if delta < 86400:
        return _plural(delta // 3600, "hour")

    days = delta // 86400
    if days == 1:
        return "yesterday"
    if days < 7:
        return _plural(days, "day")
    if days < 30:
        return _plural(days // 7, "week")
    if days < 365:
        return _plural(days // 30, "month")
    return _plural(days // 365, "year")


def format_date(date: Any) -> str:
    """
    Format a date object to YYYY-MM-DD string.

    Args:
        date: Date object (datetime or string)

    Returns:
        Formatted date string
    """
    if hasattr(date, "strftime"):
        return date.strftime("%Y-%m-%d")
    return str(date)
