"""Factory for ready-to-use schedulers."""

import logging
from pathlib import Path

from .config import ConfigLoader
from .repository import TimetableRepository
from .scheduler import TimetableScheduler
from .seed import load_sample_data

logger = logging.getLogger(__name__)


def create_scheduler(
    config_dir: Path | str | None = None,
    state_path: Path | str | None = None,
    seed: bool = True,
) -> TimetableScheduler:
    """Create a scheduler from the best available source.

    Precedence:
    1. Saved state file, when state_path is given and exists
    2. Reference CSV directory, when config_dir is given
    3. Sample data, when seed is True
    4. An empty scheduler

    Args:
        config_dir: Directory with rooms.csv, courses.csv, professors.csv,
                    timeslots.csv
        state_path: JSON state file written by TimetableRepository
        seed: Populate with sample data when no other source is given

    Returns:
        TimetableScheduler instance
    """
    if state_path is not None:
        repository = TimetableRepository(state_path)
        if repository.exists():
            return repository.load()
        logger.debug(f"No saved state at {state_path}")

    scheduler = TimetableScheduler()
    if config_dir is not None:
        ConfigLoader(config_dir).load_into(scheduler)
    elif seed:
        load_sample_data(scheduler)
        logger.info("Loaded sample timetable data")
    return scheduler
