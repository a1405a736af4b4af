"""Tests for sample data and the scheduler factory."""

import pytest

from timetable_engine.constants import ROOM_TYPE_LAB
from timetable_engine.scheduler import TimetableRepository, create_scheduler, load_sample_data
from timetable_engine.scheduler.seed import (
    SAMPLE_ASSIGNMENTS,
    SAMPLE_COURSES,
    SAMPLE_TIME_SLOTS,
    sample_room_capacity,
)


@pytest.fixture
def seeded(scheduler):
    load_sample_data(scheduler)
    return scheduler


class TestSampleData:
    """Tests for load_sample_data."""

    def test_entity_counts(self, seeded):
        assert len(seeded.list_rooms()) == 72
        assert len(seeded.list_courses()) == len(SAMPLE_COURSES)
        assert len(seeded.list_professors()) == 7
        assert len(seeded.list_time_slots()) == len(SAMPLE_TIME_SLOTS)

    def test_room_capacity_formula(self):
        assert sample_room_capacity(1, 1) == 43
        assert sample_room_capacity(7, 4) == 56

    def test_every_sample_assignment_committed(self, seeded):
        assert len(seeded.all_scheduled()) == len(SAMPLE_ASSIGNMENTS)

    def test_sample_assignments_respect_capacity(self, seeded):
        for assignment in seeded.all_scheduled():
            assert assignment.room.capacity >= assignment.course.enrolled_students

    def test_lab_course_gets_lab(self, seeded):
        lab_class = next(a for a in seeded.all_scheduled() if a.course.code == "CS702L")
        assert lab_class.room.room_type == ROOM_TYPE_LAB

    def test_auto_complete_over_sample(self, seeded):
        assert seeded.auto_complete_course("CS702") == ["CS702", "CS702L"]
        assert "101A" in seeded.auto_complete_room("101")


class TestCreateScheduler:
    """Tests for create_scheduler source precedence."""

    def test_seeded_by_default(self):
        scheduler = create_scheduler()
        assert len(scheduler.all_scheduled()) == len(SAMPLE_ASSIGNMENTS)

    def test_empty_without_seed(self):
        scheduler = create_scheduler(seed=False)
        assert scheduler.list_rooms() == []

    def test_saved_state_wins(self, tmp_path, three_room_scheduler):
        three_room_scheduler.schedule("C1", "P1", "T1")
        state = tmp_path / "state.json"
        TimetableRepository(state).save(three_room_scheduler)

        scheduler = create_scheduler(config_dir=tmp_path, state_path=state)
        assert len(scheduler.list_rooms()) == 3
        assert [a.id for a in scheduler.all_scheduled()] == ["TE1"]

    def test_missing_state_falls_back_to_seed(self, tmp_path):
        scheduler = create_scheduler(state_path=tmp_path / "missing.json")
        assert len(scheduler.list_rooms()) == 72

    def test_config_dir_skips_seed(self, tmp_path):
        (tmp_path / "rooms.csv").write_text(
            "room_number,building,capacity,type\n201,Annex,40,Lab\n", encoding="utf-8"
        )
        scheduler = create_scheduler(config_dir=tmp_path)
        assert [r.room_number for r in scheduler.list_rooms()] == ["201"]
        assert scheduler.all_scheduled() == []
