"""Result models for the scheduling engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models import Assignment, Room
from ..utils import format_utilization


class ScheduleError(str, Enum):
    """Reasons why a class could not be scheduled."""

    UNKNOWN_ID = "unknown_id"
    NO_ROOM_AVAILABLE = "no_room_available"
    CONFLICT = "conflict"
    CAPACITY_EXCEEDED = "capacity_exceeded"


@dataclass(frozen=True)
class Conflict:
    """A committed assignment that collides with a candidate.

    Attributes:
        existing: The committed assignment
        shares_room: Both use the same room
        shares_professor: Both are taught by the same professor
    """

    existing: Assignment
    shares_room: bool
    shares_professor: bool

    @property
    def description(self) -> str:
        """Human-readable explanation naming the colliding course and time."""
        reasons = []
        if self.shares_room:
            reasons.append(f"room {self.existing.room.room_number}")
        if self.shares_professor:
            reasons.append(f"professor {self.existing.professor.name}")
        return (
            f"Conflict detected with: {self.existing.course.name} "
            f"at {self.existing.time_slot.start_time} ({', '.join(reasons)})"
        )

    def __str__(self) -> str:
        return self.description


@dataclass
class InsertResult:
    """Outcome of a conflict-checked insertion."""

    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if the candidate was accepted."""
        return not self.conflicts

    @property
    def descriptions(self) -> list[str]:
        """Conflict descriptions in traversal order."""
        return [c.description for c in self.conflicts]


@dataclass
class ScheduleResult:
    """Result of a schedule or place request.

    Failures are reported here rather than raised; the transport decides how
    to render them.
    """

    success: bool
    message: str
    entry: Assignment | None = None
    room: Room | None = None
    utilization: float | None = None
    suggestion: str | None = None
    conflicts: list[str] = field(default_factory=list)
    error: ScheduleError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.error is not None:
            result["error"] = self.error.value
        if self.entry is not None:
            result["entry"] = self.entry.to_dict()
        if self.room is not None:
            result["room"] = self.room.to_dict()
        if self.utilization is not None:
            result["utilization"] = format_utilization(self.utilization)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.conflicts:
            result["conflicts"] = list(self.conflicts)
        return result


@dataclass
class ScheduleStatistics:
    """Utilization report over the committed assignments.

    by_room and by_professor are keyed by id, since names need not be unique.
    """

    total_assignments: int = 0
    total_rooms: int = 0
    rooms_in_use: int = 0
    average_utilization: float = 0.0
    by_day: dict[str, int] = field(default_factory=dict)
    by_room: dict[str, int] = field(default_factory=dict)
    by_professor: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_assignments": self.total_assignments,
            "total_rooms": self.total_rooms,
            "rooms_in_use": self.rooms_in_use,
            "average_utilization": format_utilization(self.average_utilization),
            "by_day": self.by_day,
            "by_room": self.by_room,
            "by_professor": self.by_professor,
        }
