"""Deterministic sample data for a fresh scheduler."""

from ..constants import ROOM_TYPE_LAB, ROOM_TYPE_LECTURE_HALL, ROOM_TYPE_SEMINAR
from .scheduler import TimetableScheduler

SAMPLE_BUILDING = "Building 1"
SAMPLE_FLOORS = 7
ROOMS_PER_FLOOR = 10

SAMPLE_COURSES = [
    {"code": "CS701", "name": "Advanced Algorithms", "credits": 4, "enrolled_students": 48},
    {"code": "CS702", "name": "Emerging Technologies (Theory)", "credits": 3, "enrolled_students": 46},
    {"code": "CS702L", "name": "Emerging Technologies Lab", "credits": 1, "enrolled_students": 24},
    {"code": "CS703", "name": "Numeric Optimization Techniques", "credits": 3, "enrolled_students": 52},
    {"code": "CS704", "name": "Cloud Application Development", "credits": 3, "enrolled_students": 50},
    {"code": "CS705", "name": "Natural Language Processing", "credits": 3, "enrolled_students": 45},
    {"code": "CS706", "name": "Computer Vision", "credits": 3, "enrolled_students": 44},
]

SAMPLE_PROFESSORS = [
    ("Prof. Nimesh Bumb", "Computer Science", "nimesh.bumb@university.edu"),
    ("Prof. Sridhar Pappu", "Computer Vision", "sridhar.pappu@university.edu"),
    ("Dr. Patil", "Emerging Technologies", "patil@university.edu"),
    ("Prof. Pramod Bhide", "Emerging Technologies Lab", "pramod.bhide@university.edu"),
    ("Prof. Naresh Kaushik", "Mathematics", "naresh.kaushik@university.edu"),
    ("Dr. Sarah Johnson", "Cloud Computing", "sarah.johnson@university.edu"),
    ("Dr. Emily Davis", "Natural Language Processing", "emily.davis@university.edu"),
]

SAMPLE_TIME_SLOTS = [
    ("Monday", "09:00", "10:30"),
    ("Monday", "11:00", "12:30"),
    ("Monday", "14:00", "15:30"),
    ("Tuesday", "09:00", "10:30"),
    ("Tuesday", "11:00", "12:30"),
    ("Wednesday", "09:00", "10:30"),
    ("Wednesday", "14:00", "15:30"),
    ("Thursday", "09:00", "10:30"),
    ("Friday", "11:00", "12:30"),
]

# (course id, professor id, time slot id, preferred room type)
SAMPLE_ASSIGNMENTS = [
    ("C1", "P1", "T1", None),
    ("C7", "P2", "T2", None),
    ("C2", "P3", "T3", None),
    ("C3", "P4", "T4", ROOM_TYPE_LAB),
    ("C4", "P5", "T5", None),
    ("C5", "P6", "T6", None),
    ("C6", "P7", "T7", None),
]


def sample_room_capacity(floor: int, room: int) -> int:
    """Seats in room `room` on `floor`: 35 + 3*floor + 5*(room mod 4)."""
    return 35 + floor * 3 + (room % 4) * 5


def load_sample_data(scheduler: TimetableScheduler) -> None:
    """Populate a scheduler with the sample building, courses and classes.

    Initial assignments go through schedule(), so they pass the allocator
    and the conflict index like any other request.
    """
    for floor in range(1, SAMPLE_FLOORS + 1):
        for room in range(1, ROOMS_PER_FLOOR + 1):
            scheduler.add_room(
                {
                    "room_number": f"{floor}{room:02d}",
                    "building": SAMPLE_BUILDING,
                    "capacity": sample_room_capacity(floor, room),
                    "room_type": ROOM_TYPE_SEMINAR if room % 3 == 0 else ROOM_TYPE_LECTURE_HALL,
                }
            )
    for room_number in ("101A", "101B"):
        scheduler.add_room(
            {
                "room_number": room_number,
                "building": SAMPLE_BUILDING,
                "capacity": 32,
                "room_type": ROOM_TYPE_LAB,
            }
        )

    for course in SAMPLE_COURSES:
        scheduler.add_course({**course, "department": "Computer Science"})

    for name, department, email in SAMPLE_PROFESSORS:
        scheduler.add_professor({"name": name, "department": department, "email": email})

    for day, start, end in SAMPLE_TIME_SLOTS:
        scheduler.add_time_slot({"day": day, "start_time": start, "end_time": end})

    for course_id, professor_id, time_slot_id, room_type in SAMPLE_ASSIGNMENTS:
        scheduler.schedule(course_id, professor_id, time_slot_id, preferred_type=room_type)
