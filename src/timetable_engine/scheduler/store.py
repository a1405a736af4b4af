"""Canonical in-memory collections of timetable entities."""

from dataclasses import replace

from ..constants import ID_PREFIXES, EntityKind
from ..exceptions import InvalidInputError, UnknownIdError
from ..models import Assignment, Course, Professor, Room, TimeSlot
from ..utils import parse_id_number


class EntityStore:
    """Owns courses, professors, rooms, time slots and assignments.

    Ids are a per-kind prefix plus a monotonically increasing counter
    (C1, P1, R1, T1, TE1). Counters never go backwards, so an id is never
    reused even after an assignment is removed.
    """

    def __init__(self) -> None:
        self._courses: list[Course] = []
        self._professors: list[Professor] = []
        self._rooms: list[Room] = []
        self._time_slots: list[TimeSlot] = []
        self._assignments: list[Assignment] = []
        # kind -> last issued counter
        self._counters: dict[EntityKind, int] = {kind: 0 for kind in EntityKind}

    def peek_id(self, kind: EntityKind) -> str:
        """Return the id the next call to next_id would mint."""
        return f"{ID_PREFIXES[kind]}{self._counters[kind] + 1}"

    def next_id(self, kind: EntityKind) -> str:
        """Mint a fresh id for an entity kind."""
        self._counters[kind] += 1
        return f"{ID_PREFIXES[kind]}{self._counters[kind]}"

    def restore_counter(self, kind: EntityKind, entity_id: str) -> None:
        """Advance the counter of a kind past an externally supplied id."""
        number = parse_id_number(entity_id, ID_PREFIXES[kind])
        if number is not None and number > self._counters[kind]:
            self._counters[kind] = number

    def _mint(self, kind: EntityKind, entity_id: str) -> str:
        if entity_id:
            if self.has_id(kind, entity_id):
                raise InvalidInputError("id", f"duplicate {kind.value} id '{entity_id}'")
            self.restore_counter(kind, entity_id)
            return entity_id
        return self.next_id(kind)

    def add_course(self, course: Course, keep_id: bool = False) -> Course:
        """Store a course under a fresh id (or its own id when keep_id)."""
        stored = replace(
            course, id=self._mint(EntityKind.COURSE, course.id if keep_id else "")
        )
        self._courses.append(stored)
        return stored

    def add_professor(self, professor: Professor, keep_id: bool = False) -> Professor:
        """Store a professor under a fresh id (or its own id when keep_id)."""
        stored = replace(
            professor, id=self._mint(EntityKind.PROFESSOR, professor.id if keep_id else "")
        )
        self._professors.append(stored)
        return stored

    def add_room(self, room: Room, keep_id: bool = False) -> Room:
        """Store a room under a fresh id (or its own id when keep_id)."""
        stored = replace(room, id=self._mint(EntityKind.ROOM, room.id if keep_id else ""))
        self._rooms.append(stored)
        return stored

    def add_time_slot(self, time_slot: TimeSlot, keep_id: bool = False) -> TimeSlot:
        """Store a time slot under a fresh id (or its own id when keep_id)."""
        stored = replace(
            time_slot, id=self._mint(EntityKind.TIME_SLOT, time_slot.id if keep_id else "")
        )
        self._time_slots.append(stored)
        return stored

    def add_assignment(self, assignment: Assignment) -> Assignment:
        """Append an assignment that already carries its id."""
        self.restore_counter(EntityKind.ASSIGNMENT, assignment.id)
        self._assignments.append(assignment)
        return assignment

    def remove_assignment(self, assignment_id: str) -> Assignment | None:
        """Remove an assignment by id and return it."""
        for index, assignment in enumerate(self._assignments):
            if assignment.id == assignment_id:
                return self._assignments.pop(index)
        return None

    def has_id(self, kind: EntityKind, entity_id: str) -> bool:
        """Check whether an id is already taken within a kind."""
        finders = {
            EntityKind.COURSE: self.find_course,
            EntityKind.PROFESSOR: self.find_professor,
            EntityKind.ROOM: self.find_room,
            EntityKind.TIME_SLOT: self.find_time_slot,
            EntityKind.ASSIGNMENT: self.find_assignment,
        }
        return finders[kind](entity_id) is not None

    def find_course(self, course_id: str) -> Course | None:
        return next((c for c in self._courses if c.id == course_id), None)

    def find_professor(self, professor_id: str) -> Professor | None:
        return next((p for p in self._professors if p.id == professor_id), None)

    def find_room(self, room_id: str) -> Room | None:
        return next((r for r in self._rooms if r.id == room_id), None)

    def find_time_slot(self, time_slot_id: str) -> TimeSlot | None:
        return next((t for t in self._time_slots if t.id == time_slot_id), None)

    def find_assignment(self, assignment_id: str) -> Assignment | None:
        return next((a for a in self._assignments if a.id == assignment_id), None)

    def require_course(self, course_id: str) -> Course:
        """Resolve a course id or raise UnknownIdError."""
        course = self.find_course(course_id)
        if course is None:
            raise UnknownIdError(EntityKind.COURSE.value, course_id)
        return course

    def require_time_slot(self, time_slot_id: str) -> TimeSlot:
        """Resolve a time slot id or raise UnknownIdError."""
        time_slot = self.find_time_slot(time_slot_id)
        if time_slot is None:
            raise UnknownIdError(EntityKind.TIME_SLOT.value, time_slot_id)
        return time_slot

    def courses(self) -> list[Course]:
        return list(self._courses)

    def professors(self) -> list[Professor]:
        return list(self._professors)

    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def time_slots(self) -> list[TimeSlot]:
        return list(self._time_slots)

    def assignments(self) -> list[Assignment]:
        return list(self._assignments)
