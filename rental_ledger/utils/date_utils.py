"""Date manipulation utilities"""

from datetime import date


def inclusive_day_count(start: date, end: date) -> int:
    """Number of calendar days from start to end, both ends counted"""
    return (end - start).days + 1
