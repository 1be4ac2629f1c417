"""Module: date_formatter.py

Author: Michael Economou
Date: 2026-10-12

Format dates with the user-facing tokens shown in the pattern method
(YYYY, YY, MM, DD, HH, mm, ss) instead of strftime directives, and
format media durations as HH:MM:SS.
"""

from datetime import datetime

from namecraft.config import DEFAULT_DATE_FORMAT

# Longest tokens first so YYYY is not consumed as two YY
_DATE_TOKENS = ("YYYY", "YY", "MM", "DD", "HH", "mm", "ss")


def format_date(date: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Replace the date tokens of ``date_format`` with values from ``date``."""
    values = {
        "YYYY": f"{date.year:04d}",
        "YY": f"{date.year:04d}"[-2:],
        "MM": f"{date.month:02d}",
        "DD": f"{date.day:02d}",
        "HH": f"{date.hour:02d}",
        "mm": f"{date.minute:02d}",
        "ss": f"{date.second:02d}",
    }

    result = date_format
    for token in _DATE_TOKENS:
        result = result.replace(token, values[token])
    return result


def format_time(seconds: float | int | None) -> str:
    """Format a duration in seconds as ``HH:MM:SS``; missing or invalid values give 00:00:00."""
    try:
        total = int(float(seconds or 0))
    except (TypeError, ValueError, OverflowError):
        return "00:00:00"
    if total <= 0:
        return "00:00:00"
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
