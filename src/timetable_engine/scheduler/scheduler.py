"""Scheduling coordinator: composes the store, allocator and indexes."""

import logging
import threading
from collections import Counter
from typing import Any

from ..constants import (
    MSG_CAPACITY,
    MSG_CONFLICT,
    MSG_INVALID_IDS,
    MSG_INVALID_ROOM_IDS,
    MSG_NO_ROOM,
    MSG_SCHEDULED,
    MSG_TRY_OTHER_SLOT,
    EntityKind,
)
from ..exceptions import InvalidInputError
from ..models import Assignment, Course, Professor, Room, TimeSlot
from ..validators import (
    ensure_valid_course,
    ensure_valid_professor,
    ensure_valid_room,
    ensure_valid_time_slot,
)
from .conflicts import ConflictIndex
from .models import ScheduleError, ScheduleResult, ScheduleStatistics
from .prefix_index import PrefixIndex
from .rooms import RoomAllocator
from .store import EntityStore

logger = logging.getLogger(__name__)


class TimetableScheduler:
    """Schedules classes one request at a time.

    Data flow for schedule():
    1. Resolve course, professor and time slot ids against the store
    2. Greedy allocator proposes the smallest free room that fits
    3. Conflict index checks room and professor clashes
    4. On accept, commit to index and store; on reject, nothing changes

    Every public operation runs under one re-entrant lock, so a schedule
    request observes all effects of the requests before it. Reads return
    copies of the internal collections.
    """

    def __init__(self) -> None:
        self.store = EntityStore()
        self.allocator = RoomAllocator()
        self.conflict_index = ConflictIndex()
        self.course_index = PrefixIndex()
        self.room_index = PrefixIndex()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def schedule(
        self,
        course_id: str,
        professor_id: str,
        time_slot_id: str,
        preferred_type: str | None = None,
    ) -> ScheduleResult:
        """Schedule a class into the best free room at a time slot.

        Args:
            course_id: Course to schedule
            professor_id: Professor teaching the class
            time_slot_id: Requested time slot
            preferred_type: Optional room type to try first ("Lab", ...)

        Returns:
            ScheduleResult; on failure the committed state is unchanged
        """
        with self._lock:
            course = self.store.find_course(course_id)
            professor = self.store.find_professor(professor_id)
            time_slot = self.store.find_time_slot(time_slot_id)

            if course is None or professor is None or time_slot is None:
                logger.warning(
                    f"Rejected schedule request ({course_id}, {professor_id}, "
                    f"{time_slot_id}): unknown id"
                )
                return ScheduleResult(
                    success=False,
                    message=MSG_INVALID_IDS,
                    error=ScheduleError.UNKNOWN_ID,
                )

            rooms = self.store.rooms()
            existing = self.store.assignments()
            if preferred_type:
                room = self.allocator.allocate_with_type(
                    course.enrolled_students, preferred_type, time_slot, rooms, existing
                )
            else:
                room = self.allocator.allocate(
                    course.enrolled_students, time_slot, rooms, existing
                )

            if room is None:
                logger.warning(
                    f"No room for {course.code} ({course.enrolled_students} students) "
                    f"at {time_slot}"
                )
                return ScheduleResult(
                    success=False,
                    message=MSG_NO_ROOM,
                    suggestion=MSG_TRY_OTHER_SLOT,
                    error=ScheduleError.NO_ROOM_AVAILABLE,
                )

            return self._commit(course, professor, room, time_slot)

    def place(
        self,
        course_id: str,
        professor_id: str,
        room_id: str,
        time_slot_id: str,
        assignment_id: str | None = None,
    ) -> ScheduleResult:
        """Schedule a class into a named room, bypassing the allocator.

        The capacity and conflict rules still apply.

        Args:
            course_id: Course to schedule
            professor_id: Professor teaching the class
            room_id: Room to use
            time_slot_id: Time slot to use
            assignment_id: Keep this id instead of minting one (used when
                replaying a saved timetable)

        Returns:
            ScheduleResult; on failure the committed state is unchanged
        """
        with self._lock:
            course = self.store.find_course(course_id)
            professor = self.store.find_professor(professor_id)
            room = self.store.find_room(room_id)
            time_slot = self.store.find_time_slot(time_slot_id)

            if course is None or professor is None or room is None or time_slot is None:
                return ScheduleResult(
                    success=False,
                    message=MSG_INVALID_ROOM_IDS,
                    error=ScheduleError.UNKNOWN_ID,
                )

            if room.capacity < course.enrolled_students:
                return ScheduleResult(
                    success=False,
                    message=MSG_CAPACITY,
                    room=room,
                    error=ScheduleError.CAPACITY_EXCEEDED,
                )

            if assignment_id and self.store.find_assignment(assignment_id) is not None:
                raise InvalidInputError("id", f"duplicate assignment id '{assignment_id}'")

            return self._commit(course, professor, room, time_slot, assignment_id)

    def _commit(
        self,
        course: Course,
        professor: Professor,
        room: Room,
        time_slot: TimeSlot,
        assignment_id: str | None = None,
    ) -> ScheduleResult:
        # The id is only peeked here: a rejected candidate must not consume it
        candidate = Assignment(
            id=assignment_id or self.store.peek_id(EntityKind.ASSIGNMENT),
            course=course,
            professor=professor,
            room=room,
            time_slot=time_slot,
        )

        outcome = self.conflict_index.insert(candidate)
        if not outcome.ok:
            logger.warning(
                f"Conflict scheduling {course.code} at {time_slot}: "
                f"{len(outcome.conflicts)} offender(s)"
            )
            return ScheduleResult(
                success=False,
                message=MSG_CONFLICT,
                conflicts=outcome.descriptions,
                error=ScheduleError.CONFLICT,
            )

        self.store.add_assignment(candidate)
        utilization = self.allocator.utilization(course.enrolled_students, room)
        logger.info(
            f"Scheduled {candidate.id}: {course.code} in room {room.room_number} "
            f"at {time_slot} ({utilization:.1f}% utilization)"
        )
        return ScheduleResult(
            success=True,
            message=MSG_SCHEDULED,
            entry=candidate,
            room=room,
            utilization=utilization,
        )

    def unschedule(self, assignment_id: str) -> bool:
        """Remove a committed assignment from the index and the store.

        Returns:
            True if the assignment existed
        """
        with self._lock:
            assignment = self.store.find_assignment(assignment_id)
            if assignment is None:
                return False
            self.conflict_index.remove(assignment)
            self.store.remove_assignment(assignment_id)
            logger.info(f"Removed assignment {assignment_id}")
            return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def auto_complete_course(self, prefix: str) -> list[str]:
        """Course codes and names starting with the prefix."""
        with self._lock:
            return self.course_index.auto_complete(prefix)

    def auto_complete_room(self, prefix: str) -> list[str]:
        """Room numbers and building names starting with the prefix."""
        with self._lock:
            return self.room_index.auto_complete(prefix)

    def available_rooms(self, time_slot_id: str) -> list[Room]:
        """Rooms free at a time slot; empty if the slot id is unknown."""
        with self._lock:
            time_slot = self.store.find_time_slot(time_slot_id)
            if time_slot is None:
                return []
            return self.allocator.available(
                time_slot, self.store.rooms(), self.store.assignments()
            )

    def optimal_room(self, course_id: str, time_slot_id: str) -> Room | None:
        """Free room with utilization closest to the target for a course."""
        with self._lock:
            course = self.store.find_course(course_id)
            time_slot = self.store.find_time_slot(time_slot_id)
            if course is None or time_slot is None:
                return None
            return self.allocator.find_optimal(
                course.enrolled_students,
                time_slot,
                self.store.rooms(),
                self.store.assignments(),
            )

    def schedule_by_day(self, day: str) -> list[Assignment]:
        """Assignments on a day, in start time order."""
        with self._lock:
            return self.conflict_index.find_by_day(day)

    def all_scheduled(self) -> list[Assignment]:
        """All assignments in (day, start time) order."""
        with self._lock:
            return self.conflict_index.list_all()

    def statistics(self) -> ScheduleStatistics:
        """Utilization report over the committed assignments."""
        with self._lock:
            assignments = self.conflict_index.list_all()
            rooms = self.store.rooms()

        by_day = Counter(a.time_slot.day for a in assignments)
        by_room = Counter(a.room.id for a in assignments)
        by_professor = Counter(a.professor.id for a in assignments)
        average = (
            sum(a.utilization for a in assignments) / len(assignments)
            if assignments
            else 0.0
        )
        return ScheduleStatistics(
            total_assignments=len(assignments),
            total_rooms=len(rooms),
            rooms_in_use=len({a.room.id for a in assignments}),
            average_utilization=average,
            by_day=dict(by_day),
            by_room=dict(by_room),
            by_professor=dict(by_professor),
        )

    # ------------------------------------------------------------------
    # Reference entities
    # ------------------------------------------------------------------

    def list_courses(self) -> list[Course]:
        with self._lock:
            return self.store.courses()

    def list_professors(self) -> list[Professor]:
        with self._lock:
            return self.store.professors()

    def list_rooms(self) -> list[Room]:
        with self._lock:
            return self.store.rooms()

    def list_time_slots(self) -> list[TimeSlot]:
        with self._lock:
            return self.store.time_slots()

    def add_course(self, payload: Course | dict[str, Any], keep_id: bool = False) -> Course:
        """Validate and store a course, indexing its code and name.

        Raises:
            InvalidInputError: If the payload violates a field constraint
        """
        course = payload if isinstance(payload, Course) else Course.from_dict(payload)
        ensure_valid_course(course)
        with self._lock:
            stored = self.store.add_course(course, keep_id=keep_id)
            self.course_index.insert(stored.code)
            self.course_index.insert(stored.name)
        logger.debug(f"Added course {stored.id} ({stored.code})")
        return stored

    def add_professor(
        self, payload: Professor | dict[str, Any], keep_id: bool = False
    ) -> Professor:
        """Validate and store a professor."""
        professor = (
            payload if isinstance(payload, Professor) else Professor.from_dict(payload)
        )
        ensure_valid_professor(professor)
        with self._lock:
            stored = self.store.add_professor(professor, keep_id=keep_id)
        logger.debug(f"Added professor {stored.id} ({stored.name})")
        return stored

    def add_room(self, payload: Room | dict[str, Any], keep_id: bool = False) -> Room:
        """Validate and store a room, indexing its number and building."""
        room = payload if isinstance(payload, Room) else Room.from_dict(payload)
        ensure_valid_room(room)
        with self._lock:
            stored = self.store.add_room(room, keep_id=keep_id)
            self.room_index.insert(stored.room_number)
            self.room_index.insert(stored.building)
        logger.debug(f"Added room {stored.id} ({stored.room_number}, {stored.capacity} seats)")
        return stored

    def add_time_slot(
        self, payload: TimeSlot | dict[str, Any], keep_id: bool = False
    ) -> TimeSlot:
        """Validate and store a time slot."""
        time_slot = payload if isinstance(payload, TimeSlot) else TimeSlot.from_dict(payload)
        ensure_valid_time_slot(time_slot)
        with self._lock:
            stored = self.store.add_time_slot(time_slot, keep_id=keep_id)
        logger.debug(f"Added time slot {stored.id} ({stored})")
        return stored
