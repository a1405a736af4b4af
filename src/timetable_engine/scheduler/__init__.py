"""Scheduling engine: conflict index, room allocator and prefix indexes.

Main classes:
- TimetableScheduler: Coordinates the atomic "schedule this class" operation
- ConflictIndex: AVL tree of assignments keyed by (day, start time)
- RoomAllocator: Greedy smallest-room-that-fits allocation
- PrefixIndex: Auto-completion over course and room strings
- TimetableRepository: JSON load()/save() hooks

Usage:
    from timetable_engine.scheduler import create_scheduler

    scheduler = create_scheduler()
    result = scheduler.schedule("C1", "P2", "T8")
    print(result.to_dict())
"""

from .config import ConfigLoader
from .conflicts import ConflictIndex, check_conflict
from .factory import create_scheduler
from .models import (
    Conflict,
    InsertResult,
    ScheduleError,
    ScheduleResult,
    ScheduleStatistics,
)
from .prefix_index import PrefixIndex
from .repository import TimetableRepository
from .rooms import RoomAllocator
from .scheduler import TimetableScheduler
from .seed import load_sample_data
from .store import EntityStore

__all__ = [
    # Main scheduler
    "TimetableScheduler",
    "create_scheduler",
    "load_sample_data",
    # Components
    "ConflictIndex",
    "EntityStore",
    "PrefixIndex",
    "RoomAllocator",
    "check_conflict",
    # Persistence and configuration
    "ConfigLoader",
    "TimetableRepository",
    # Models
    "Conflict",
    "InsertResult",
    "ScheduleError",
    "ScheduleResult",
    "ScheduleStatistics",
]
