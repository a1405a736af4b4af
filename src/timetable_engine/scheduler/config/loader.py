"""Reference data loader: CSV files feeding the add operations."""

import csv
import logging
from pathlib import Path
from typing import Any

from ..scheduler import TimetableScheduler

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads courses, professors, rooms and time slots from a directory.

    Expected files (each optional, one header row, no id column):
    - rooms.csv: room_number, building, capacity, type
    - courses.csv: code, name, credits, department, enrolled_students
    - professors.csv: name, department, email
    - timeslots.csv: day, start_time, end_time

    Rows go through the scheduler's add operations, so ids are minted and the
    prefix indexes stay coherent. Invalid rows raise InvalidInputError.
    """

    FILES = {
        "rooms": "rooms.csv",
        "courses": "courses.csv",
        "professors": "professors.csv",
        "time_slots": "timeslots.csv",
    }

    def __init__(self, config_dir: Path | str | None = None):
        if config_dir is None:
            config_dir = Path("reference")
        self.config_dir = Path(config_dir)

    def _get_path(self, filename: str) -> Path | None:
        """Get path to config file if it exists."""
        path = self.config_dir / filename
        return path if path.exists() else None

    def _read_rows(self, filename: str) -> list[dict[str, Any]]:
        path = self._get_path(filename)
        if path is None:
            logger.debug(f"No {filename} in {self.config_dir}, skipping")
            return []

        rows = []
        with open(path, encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                cleaned = {k.strip(): (v or "").strip() for k, v in row.items() if k}
                if any(cleaned.values()):
                    rows.append(cleaned)
        return rows

    def load_into(self, scheduler: TimetableScheduler) -> dict[str, int]:
        """Add every reference row to a scheduler.

        Returns:
            Number of entities loaded per kind
        """
        counts = {}
        adders = {
            "rooms": scheduler.add_room,
            "courses": scheduler.add_course,
            "professors": scheduler.add_professor,
            "time_slots": scheduler.add_time_slot,
        }
        for kind, filename in self.FILES.items():
            rows = self._read_rows(filename)
            for row in rows:
                adders[kind](row)
            counts[kind] = len(rows)

        logger.info(
            f"Loaded reference data from {self.config_dir}: "
            + ", ".join(f"{count} {kind}" for kind, count in counts.items())
        )
        return counts
