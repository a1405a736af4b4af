"""Timetable Engine - in-memory university class scheduling.

This package schedules classes one request at a time onto (room, time slot)
pairs while enforcing three hard constraints: no room double-booking, no
professor double-booking, and sufficient room capacity. It combines an AVL
conflict index, a greedy room allocator and prefix-tree auto-completion.

Example usage:
    from timetable_engine import TimetableScheduler

    scheduler = TimetableScheduler()
    room = scheduler.add_room(
        {"room_number": "101", "building": "Main", "capacity": 50, "type": "Lecture Hall"}
    )
    course = scheduler.add_course({"code": "CS701", "name": "Algorithms", "enrolled_students": 40})
    professor = scheduler.add_professor({"name": "Dr. Patil"})
    slot = scheduler.add_time_slot({"day": "Monday", "start_time": "09:00", "end_time": "10:30"})

    result = scheduler.schedule(course.id, professor.id, slot.id)
    print(result.to_dict())  # {"success": True, ..., "utilization": "80.0%"}
"""

from .exceptions import (
    InvalidInputError,
    RepositoryError,
    TimetableError,
    UnknownIdError,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .models import Assignment, Course, Professor, Room, TimeSlot
from .scheduler import (
    ConfigLoader,
    ScheduleError,
    ScheduleResult,
    ScheduleStatistics,
    TimetableRepository,
    TimetableScheduler,
    create_scheduler,
)

__version__ = "0.1.0"

__all__ = [
    # Main scheduler
    "TimetableScheduler",
    "create_scheduler",
    # Models
    "Assignment",
    "Course",
    "Professor",
    "Room",
    "TimeSlot",
    "ScheduleError",
    "ScheduleResult",
    "ScheduleStatistics",
    # Persistence and configuration
    "ConfigLoader",
    "TimetableRepository",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "TimetableError",
    "InvalidInputError",
    "UnknownIdError",
    "RepositoryError",
]
