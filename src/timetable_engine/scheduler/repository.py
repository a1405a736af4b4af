"""JSON file repository: the durable store behind the in-memory scheduler."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..exceptions import InvalidInputError, RepositoryError
from ..models import Course, Professor, Room, TimeSlot
from .scheduler import TimetableScheduler

logger = logging.getLogger(__name__)

STATE_VERSION = 1


class TimetableRepository:
    """Loads and saves a whole timetable as one JSON document.

    The scheduler stays memory-resident; this class only provides the
    load()/save() hooks. Loading replays every assignment through
    TimetableScheduler.place, so a document that violates capacity or
    conflict rules is rejected instead of silently corrupting the indexes.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        """Check whether a saved state is present."""
        return self.path.exists()

    def save(self, scheduler: TimetableScheduler) -> None:
        """Write the scheduler's entities and assignments to disk."""
        document = to_document(scheduler)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=2)
        logger.info(
            f"Saved {len(document['assignments'])} assignments to {self.path}"
        )

    def load(self) -> TimetableScheduler:
        """Rebuild a scheduler from the saved document.

        Raises:
            RepositoryError: If the file is missing, malformed or inconsistent
        """
        if not self.path.exists():
            raise RepositoryError("state file not found", str(self.path))

        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise RepositoryError(f"invalid JSON: {e}", str(self.path)) from e

        scheduler = from_document(document, source=str(self.path))
        logger.info(
            f"Loaded {len(scheduler.all_scheduled())} assignments from {self.path}"
        )
        return scheduler


def to_document(scheduler: TimetableScheduler) -> dict[str, Any]:
    """Serialize a scheduler to a JSON-compatible dictionary."""
    return {
        "version": STATE_VERSION,
        "saved_at": datetime.now().isoformat(),
        "courses": [c.to_dict() for c in scheduler.list_courses()],
        "professors": [p.to_dict() for p in scheduler.list_professors()],
        "rooms": [r.to_dict() for r in scheduler.list_rooms()],
        "time_slots": [t.to_dict() for t in scheduler.list_time_slots()],
        "assignments": [a.to_record() for a in scheduler.store.assignments()],
    }


def from_document(document: dict[str, Any], source: str | None = None) -> TimetableScheduler:
    """Rebuild a scheduler from a dictionary produced by to_document.

    Raises:
        RepositoryError: If an entity is invalid or an assignment is rejected
    """
    if not isinstance(document, dict):
        raise RepositoryError("expected a JSON object", source)

    scheduler = TimetableScheduler()
    try:
        for data in document.get("rooms", []):
            scheduler.add_room(Room.from_dict(data), keep_id=True)
        for data in document.get("courses", []):
            scheduler.add_course(Course.from_dict(data), keep_id=True)
        for data in document.get("professors", []):
            scheduler.add_professor(Professor.from_dict(data), keep_id=True)
        for data in document.get("time_slots", []):
            scheduler.add_time_slot(TimeSlot.from_dict(data), keep_id=True)
    except InvalidInputError as e:
        raise RepositoryError(str(e), source) from e

    for record in document.get("assignments", []):
        try:
            result = scheduler.place(
                record["courseId"],
                record["professorId"],
                record["roomId"],
                record["timeSlotId"],
                assignment_id=record.get("id"),
            )
        except KeyError as e:
            raise RepositoryError(f"assignment record missing {e}", source) from e
        except InvalidInputError as e:
            raise RepositoryError(str(e), source) from e

        if not result.success:
            details = "; ".join(result.conflicts) or result.message
            raise RepositoryError(
                f"assignment {record.get('id', '?')} rejected: {details}", source
            )

    return scheduler
