"""Test fixtures for timetable engine tests."""

import pytest

from timetable_engine.models import Assignment, Course, Professor, Room, TimeSlot
from timetable_engine.scheduler import TimetableScheduler


@pytest.fixture
def scheduler():
    """An empty scheduler."""
    return TimetableScheduler()


@pytest.fixture
def three_room_scheduler():
    """Rooms R1 (30), R2 (50), R3 (80), one course of 40, Monday 09:00-10:30."""
    s = TimetableScheduler()
    for number, capacity in (("101", 30), ("102", 50), ("103", 80)):
        s.add_room(
            {
                "room_number": number,
                "building": "Main Building",
                "capacity": capacity,
                "room_type": "Lecture Hall",
            }
        )
    s.add_course(
        {
            "code": "CS701",
            "name": "Advanced Algorithms",
            "credits": 4,
            "department": "Computer Science",
            "enrolled_students": 40,
        }
    )
    s.add_course(
        {
            "code": "CS702",
            "name": "Emerging Technologies",
            "credits": 3,
            "department": "Computer Science",
            "enrolled_students": 40,
        }
    )
    s.add_professor({"name": "Dr. Patil", "department": "CS", "email": "patil@uni.edu"})
    s.add_professor({"name": "Dr. Davis", "department": "CS", "email": "davis@uni.edu"})
    s.add_time_slot({"day": "Monday", "start_time": "09:00", "end_time": "10:30"})
    return s


def make_room(room_id: str, capacity: int, room_type: str = "Lecture Hall") -> Room:
    return Room(
        id=room_id,
        room_number=room_id.lstrip("R") or room_id,
        building="Main Building",
        capacity=capacity,
        room_type=room_type,
    )


def make_slot(day: str, start: str, end: str, slot_id: str = "T1") -> TimeSlot:
    return TimeSlot(id=slot_id, day=day, start_time=start, end_time=end)


def make_assignment(
    assignment_id: str,
    room: Room,
    slot: TimeSlot,
    professor_id: str = "P1",
    course_name: str = "Course",
    students: int = 30,
) -> Assignment:
    return Assignment(
        id=assignment_id,
        course=Course(
            id=f"C{assignment_id}",
            code=f"CS{assignment_id}",
            name=course_name,
            credits=3,
            department="CS",
            enrolled_students=students,
        ),
        professor=Professor(
            id=professor_id, name=f"Prof {professor_id}", department="CS", email=""
        ),
        room=room,
        time_slot=slot,
    )

