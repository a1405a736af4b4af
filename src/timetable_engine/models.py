"""Data models for timetable entities.

Entities are frozen dataclasses: once stored they are never mutated, so the
shallow list copies handed out by the store cannot corrupt internal state.
Payload dictionaries may use either snake_case or the camelCase keys of the
JSON wire format (``enrolledStudents``, ``roomNumber``, ``startTime``).
"""

from dataclasses import dataclass
from typing import Any, Self

from .exceptions import InvalidInputError
from .normalization import normalize_day, normalize_time


def _get(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key from a payload."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _get_str(data: dict[str, Any], *keys: str) -> str:
    return str(_get(data, *keys, default="")).strip()


def _get_int(data: dict[str, Any], field: str, *keys: str, default: int = 0) -> int:
    value = _get(data, *keys, default=default)
    if isinstance(value, bool):
        raise InvalidInputError(field, f"expected an integer, got '{value}'")
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidInputError(field, f"expected an integer, got '{value}'") from None


@dataclass(frozen=True)
class Course:
    """A course offered for scheduling.

    Attributes:
        id: System-assigned identifier (C1, C2, ...)
        code: Course code such as "CS701"
        name: Course title
        credits: Credit points
        department: Owning department
        enrolled_students: Number of enrolled students
    """

    id: str
    code: str
    name: str
    credits: int
    department: str
    enrolled_students: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Course from a payload dictionary."""
        return cls(
            id=_get_str(data, "id"),
            code=_get_str(data, "code"),
            name=_get_str(data, "name"),
            credits=_get_int(data, "credits", "credits"),
            department=_get_str(data, "department"),
            enrolled_students=_get_int(
                data, "enrolledStudents", "enrolled_students", "enrolledStudents"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "credits": self.credits,
            "department": self.department,
            "enrolledStudents": self.enrolled_students,
        }


@dataclass(frozen=True)
class Professor:
    """A professor who teaches scheduled classes."""

    id: str
    name: str
    department: str
    email: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Professor from a payload dictionary."""
        return cls(
            id=_get_str(data, "id"),
            name=_get_str(data, "name"),
            department=_get_str(data, "department"),
            email=_get_str(data, "email"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "email": self.email,
        }


@dataclass(frozen=True)
class Room:
    """A physical room.

    Attributes:
        id: System-assigned identifier (R1, R2, ...)
        room_number: Room number such as "101" or "101A"
        building: Building name
        capacity: Seats available
        room_type: Lecture Hall, Lab, Seminar Room, ...
    """

    id: str
    room_number: str
    building: str
    capacity: int
    room_type: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Room from a payload dictionary."""
        return cls(
            id=_get_str(data, "id"),
            room_number=_get_str(data, "roomNumber", "room_number"),
            building=_get_str(data, "building"),
            capacity=_get_int(data, "capacity", "capacity"),
            room_type=_get_str(data, "type", "room_type"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "roomNumber": self.room_number,
            "building": self.building,
            "capacity": self.capacity,
            "type": self.room_type,
        }


@dataclass(frozen=True)
class TimeSlot:
    """A weekly window: weekday plus HH:MM start and end.

    Days are stored in canonical title case, so lexicographic ordering of
    (day, start_time) is consistent across differently-cased inputs. Times
    compare lexicographically, which matches chronological order for
    zero-padded 24-hour strings.
    """

    id: str
    day: str
    start_time: str
    end_time: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "day", normalize_day(self.day))
        object.__setattr__(self, "start_time", normalize_time(self.start_time))
        object.__setattr__(self, "end_time", normalize_time(self.end_time))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a TimeSlot from a payload dictionary."""
        return cls(
            id=_get_str(data, "id"),
            day=_get_str(data, "day"),
            start_time=_get_str(data, "startTime", "start_time"),
            end_time=_get_str(data, "endTime", "end_time"),
        )

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check whether two slots share a day and overlap (half-open)."""
        if self.day.lower() != other.day.lower():
            return False
        return self.start_time < other.end_time and other.start_time < self.end_time

    def __str__(self) -> str:
        return f"{self.day} {self.start_time}-{self.end_time}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "day": self.day,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }


@dataclass(frozen=True)
class Assignment:
    """A scheduled class: one course and professor in one room at one slot."""

    id: str
    course: Course
    professor: Professor
    room: Room
    time_slot: TimeSlot

    @property
    def key(self) -> tuple[str, str]:
        """Ordering key (case-folded day, start_time) used by the conflict index."""
        return (self.time_slot.day.lower(), self.time_slot.start_time)

    @property
    def utilization(self) -> float:
        """Enrolled students as a percentage of room capacity."""
        if self.room.capacity == 0:
            return 0.0
        return self.course.enrolled_students * 100.0 / self.room.capacity

    def to_record(self) -> dict[str, str]:
        """Id-only form used by the repository."""
        return {
            "id": self.id,
            "courseId": self.course.id,
            "professorId": self.professor.id,
            "roomId": self.room.id,
            "timeSlotId": self.time_slot.id,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with embedded entities."""
        return {
            "id": self.id,
            "course": self.course.to_dict(),
            "professor": self.professor.to_dict(),
            "room": self.room.to_dict(),
            "timeSlot": self.time_slot.to_dict(),
        }
