"""Normalization utilities for days, times and search terms."""

from .constants import WEEKDAYS

_WEEKDAY_LOOKUP = {day.lower(): day for day in WEEKDAYS}


def normalize_day(day: str) -> str:
    """Normalize a weekday name to its canonical title case.

    "monday", "MONDAY" and " Monday " all become "Monday". Strings that are
    not weekday names are returned stripped but otherwise unchanged, so the
    caller can reject them.

    Args:
        day: Raw day string

    Returns:
        Canonical weekday name, or the stripped input if it is not a weekday
    """
    if not day:
        return ""
    cleaned = str(day).strip()
    return _WEEKDAY_LOOKUP.get(cleaned.lower(), cleaned)


def days_equal(day1: str, day2: str) -> bool:
    """Case-insensitive weekday equality."""
    return day1.strip().lower() == day2.strip().lower()


def normalize_time(value: str) -> str:
    """Zero-pad an H:MM time to HH:MM ("9:00" -> "09:00")."""
    if not value:
        return ""
    cleaned = str(value).strip()
    hours, sep, minutes = cleaned.partition(":")
    if sep and hours.isdigit() and len(hours) == 1:
        return f"0{hours}:{minutes}"
    return cleaned


def normalize_search_term(term: str) -> str:
    """Fold a prefix-index term to upper case."""
    if not term:
        return ""
    return str(term).upper()
