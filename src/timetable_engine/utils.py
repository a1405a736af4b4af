"""Utility functions for the timetable engine."""

import re

from .constants import WEEKDAYS
from .models import Assignment, Room

_ID_PATTERN = re.compile(r"^([A-Za-z]*)(\d+)$")


def id_sort_key(entity_id: str) -> tuple[str, int, str]:
    """Natural sort key for ids, so "R2" sorts before "R10".

    Args:
        entity_id: Id such as "R10"

    Returns:
        Tuple of (prefix, number, raw id)
    """
    match = _ID_PATTERN.match(entity_id)
    if match:
        return (match.group(1), int(match.group(2)), entity_id)
    return (entity_id, 0, entity_id)


def parse_id_number(entity_id: str, prefix: str) -> int | None:
    """Extract the counter from an id with the given prefix ("TE7" -> 7)."""
    match = _ID_PATTERN.match(entity_id)
    if match and match.group(1) == prefix:
        return int(match.group(2))
    return None


def room_sort_key(room: Room) -> tuple[int, tuple[str, int, str]]:
    """Ascending capacity, then natural id order."""
    return (room.capacity, id_sort_key(room.id))


def weekday_index(day: str) -> int:
    """Position of a weekday in the calendar week (unknown days sort last)."""
    lowered = day.strip().lower()
    for index, name in enumerate(WEEKDAYS):
        if name.lower() == lowered:
            return index
    return len(WEEKDAYS)


def sort_by_weekday(assignments: list[Assignment]) -> list[Assignment]:
    """Sort assignments Monday to Sunday, then by start time.

    The conflict index orders days as strings ("Friday" < "Monday"); callers
    that present a calendar week use this instead.
    """
    return sorted(
        assignments,
        key=lambda a: (weekday_index(a.time_slot.day), a.time_slot.start_time),
    )


def format_utilization(utilization: float) -> str:
    """Render a utilization percentage as "NN.N%"."""
    return f"{utilization:.1f}%"
