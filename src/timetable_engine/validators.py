"""Validation logic for timetable entities."""

import re

from .constants import TIME_PATTERN, WEEKDAYS
from .exceptions import InvalidInputError
from .models import Course, Professor, Room, TimeSlot


def validate_required(value: str, field_name: str) -> tuple[bool, str | None]:
    """Validate that a string field is present and not blank.

    Args:
        value: Field value
        field_name: Name of the field for error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or not str(value).strip():
        return False, f"{field_name} is empty"
    return True, None


def validate_non_negative(value: int, field_name: str) -> tuple[bool, str | None]:
    """Validate a count that may be zero (credits, enrolled students).

    Args:
        value: Integer value to validate
        field_name: Name of the field for error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"{field_name} must be an integer, got '{value}'"
    if value < 0:
        return False, f"Negative {field_name}: {value}"
    return True, None


def validate_capacity(capacity: int) -> tuple[bool, str | None]:
    """Validate room capacity (a positive integer)."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        return False, f"capacity must be an integer, got '{capacity}'"
    if capacity <= 0:
        return False, f"capacity must be positive, got {capacity}"
    return True, None


def validate_time(value: str, field_name: str = "time") -> tuple[bool, str | None]:
    """Validate an HH:MM 24-hour time string.

    Args:
        value: Time string such as "09:00"
        field_name: Name of the field for error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not value:
        return False, f"{field_name} is empty"
    if not re.match(TIME_PATTERN, value):
        return False, f"{field_name} must be HH:MM (24-hour), got '{value}'"
    return True, None


def validate_day(day: str) -> tuple[bool, str | None]:
    """Validate an English weekday name (case-insensitive)."""
    if not day:
        return False, "day is empty"
    if day.strip().lower() not in {d.lower() for d in WEEKDAYS}:
        return False, f"Unknown day: '{day}'. Expected one of: {', '.join(WEEKDAYS)}"
    return True, None


def validate_time_range(start_time: str, end_time: str) -> tuple[bool, str | None]:
    """Validate that a slot ends after it starts."""
    if start_time >= end_time:
        return False, f"start time {start_time} must be before end time {end_time}"
    return True, None


def validate_email(email: str) -> tuple[bool, str | None]:
    """Validate an email address loosely. Empty addresses are allowed."""
    if not email:
        return True, None
    if not re.match(r"^[^@\s]+@[^@\s]+$", email):
        return False, f"Invalid email address: '{email}'"
    return True, None


def _raise_first(checks: list[tuple[str, tuple[bool, str | None]]]) -> None:
    for field_name, (is_valid, message) in checks:
        if not is_valid:
            raise InvalidInputError(field_name, message or "invalid value")


def ensure_valid_course(course: Course) -> None:
    """Raise InvalidInputError if a course payload is invalid."""
    _raise_first(
        [
            ("code", validate_required(course.code, "code")),
            ("name", validate_required(course.name, "name")),
            ("credits", validate_non_negative(course.credits, "credits")),
            (
                "enrolledStudents",
                validate_non_negative(course.enrolled_students, "enrolled students"),
            ),
        ]
    )


def ensure_valid_professor(professor: Professor) -> None:
    """Raise InvalidInputError if a professor payload is invalid."""
    _raise_first(
        [
            ("name", validate_required(professor.name, "name")),
            ("email", validate_email(professor.email)),
        ]
    )


def ensure_valid_room(room: Room) -> None:
    """Raise InvalidInputError if a room payload is invalid."""
    _raise_first(
        [
            ("roomNumber", validate_required(room.room_number, "room number")),
            ("capacity", validate_capacity(room.capacity)),
            ("type", validate_required(room.room_type, "room type")),
        ]
    )


def ensure_valid_time_slot(time_slot: TimeSlot) -> None:
    """Raise InvalidInputError if a time slot payload is invalid."""
    _raise_first(
        [
            ("day", validate_day(time_slot.day)),
            ("startTime", validate_time(time_slot.start_time, "start time")),
            ("endTime", validate_time(time_slot.end_time, "end time")),
        ]
    )
    _raise_first(
        [("endTime", validate_time_range(time_slot.start_time, time_slot.end_time))]
    )
