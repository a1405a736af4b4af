"""Constants for the timetable engine."""

from enum import Enum


class EntityKind(str, Enum):
    """Kinds of stored entities."""

    COURSE = "course"
    PROFESSOR = "professor"
    ROOM = "room"
    TIME_SLOT = "time_slot"
    ASSIGNMENT = "assignment"


# Id prefixes per entity kind (C1, P1, R1, T1, TE1)
ID_PREFIXES = {
    EntityKind.COURSE: "C",
    EntityKind.PROFESSOR: "P",
    EntityKind.ROOM: "R",
    EntityKind.TIME_SLOT: "T",
    EntityKind.ASSIGNMENT: "TE",
}

# Weekdays in calendar order
WEEKDAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

# Known room types (other non-empty types are accepted)
ROOM_TYPE_LECTURE_HALL = "Lecture Hall"
ROOM_TYPE_LAB = "Lab"
ROOM_TYPE_SEMINAR = "Seminar Room"

# HH:MM, zero-padded, 24-hour
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

# Utilization percentage that find_optimal aims for
TARGET_UTILIZATION = 85.0

# Result messages
MSG_INVALID_IDS = "Invalid course, professor, or time slot"
MSG_INVALID_ROOM_IDS = "Invalid course, professor, room, or time slot"
MSG_NO_ROOM = "No suitable room available for this time slot"
MSG_TRY_OTHER_SLOT = "Try a different time slot"
MSG_CONFLICT = "Scheduling conflict detected"
MSG_CAPACITY = "Room capacity is smaller than course enrollment"
MSG_SCHEDULED = "Class scheduled successfully"
