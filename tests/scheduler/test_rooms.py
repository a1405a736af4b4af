"""Tests for RoomAllocator class."""

import pytest

from timetable_engine.scheduler.rooms import RoomAllocator

from conftest import make_assignment, make_room, make_slot


@pytest.fixture
def allocator():
    return RoomAllocator()


@pytest.fixture
def rooms():
    # Deliberately out of capacity order
    return [make_room("R3", 80), make_room("R1", 30), make_room("R2", 50)]


@pytest.fixture
def monday_nine():
    return make_slot("Monday", "09:00", "10:30")


class TestAllocate:
    """Tests for greedy smallest-fit allocation."""

    def test_smallest_room_that_fits(self, allocator, rooms, monday_nine):
        room = allocator.allocate(40, monday_nine, rooms, [])
        assert room.id == "R2"

    def test_exact_capacity_fits(self, allocator, rooms, monday_nine):
        assert allocator.allocate(50, monday_nine, rooms, []).id == "R2"

    def test_skips_occupied_room(self, allocator, rooms, monday_nine):
        taken = make_assignment("1", make_room("R2", 50), monday_nine, "P1")
        room = allocator.allocate(40, monday_nine, rooms, [taken])
        assert room.id == "R3"

    def test_occupied_only_when_overlapping(self, allocator, rooms, monday_nine):
        earlier = make_assignment("1", make_room("R2", 50), make_slot("Monday", "07:30", "09:00"))
        assert allocator.allocate(40, monday_nine, rooms, [earlier]).id == "R2"

    def test_none_when_too_large(self, allocator, rooms, monday_nine):
        assert allocator.allocate(81, monday_nine, rooms, []) is None

    def test_none_when_all_taken(self, allocator, rooms, monday_nine):
        existing = [
            make_assignment(str(i), room, monday_nine, f"P{i}") for i, room in enumerate(rooms)
        ]
        assert allocator.allocate(10, monday_nine, rooms, existing) is None

    def test_ties_broken_by_natural_id(self, allocator, monday_nine):
        same_size = [make_room("R10", 40), make_room("R2", 40), make_room("R9", 40)]
        assert allocator.allocate(40, monday_nine, same_size, []).id == "R2"

    def test_input_order_does_not_matter(self, allocator, rooms, monday_nine):
        first = allocator.allocate(25, monday_nine, rooms, [])
        second = allocator.allocate(25, monday_nine, list(reversed(rooms)), [])
        assert first == second

    def test_never_returns_undersized_room(self, allocator, rooms, monday_nine):
        for students in range(0, 90, 7):
            room = allocator.allocate(students, monday_nine, rooms, [])
            if room is not None:
                assert room.capacity >= students


class TestAllocateWithType:
    """Tests for type-preferring allocation."""

    def test_prefers_requested_type(self, allocator, monday_nine):
        rooms = [make_room("R1", 40), make_room("R2", 60, "Lab")]
        assert allocator.allocate_with_type(30, "lab", monday_nine, rooms, []).id == "R2"

    def test_falls_back_to_any_type(self, allocator, monday_nine):
        rooms = [make_room("R1", 40), make_room("R2", 20, "Lab")]
        assert allocator.allocate_with_type(30, "Lab", monday_nine, rooms, []).id == "R1"

    def test_none_when_nothing_fits(self, allocator, monday_nine):
        rooms = [make_room("R1", 20), make_room("R2", 20, "Lab")]
        assert allocator.allocate_with_type(30, "Lab", monday_nine, rooms, []) is None


class TestAvailable:
    """Tests for free room listing."""

    def test_sorted_by_capacity(self, allocator, rooms, monday_nine):
        assert [r.id for r in allocator.available(monday_nine, rooms, [])] == ["R1", "R2", "R3"]

    def test_excludes_busy_rooms(self, allocator, rooms, monday_nine):
        taken = make_assignment("1", make_room("R1", 30), make_slot("Monday", "10:00", "11:00"))
        free = allocator.available(monday_nine, rooms, [taken])
        assert [r.id for r in free] == ["R2", "R3"]

    def test_other_day_does_not_block(self, allocator, rooms, monday_nine):
        taken = make_assignment("1", make_room("R1", 30), make_slot("Tuesday", "09:00", "10:30"))
        assert len(allocator.available(monday_nine, rooms, [taken])) == 3


class TestUtilization:
    """Tests for utilization percentage."""

    def test_percentage(self, allocator):
        assert allocator.utilization(40, make_room("R2", 50)) == 80.0

    def test_missing_room(self, allocator):
        assert allocator.utilization(40, None) == 0.0

    def test_zero_capacity(self, allocator):
        assert allocator.utilization(40, make_room("R9", 0)) == 0.0


class TestFindOptimal:
    """Tests for target-utilization room choice."""

    def test_closest_to_target(self, allocator, monday_nine):
        # 40 students: 45 seats -> 88.9%, 50 seats -> 80.0%, 48 seats -> 83.3%
        rooms = [make_room("R1", 45), make_room("R2", 50), make_room("R3", 48)]
        assert allocator.find_optimal(40, monday_nine, rooms, []).id == "R3"

    def test_may_differ_from_greedy(self, allocator, monday_nine):
        # 30 students: 31 seats -> 96.8%, 35 seats -> 85.7%
        rooms = [make_room("R1", 31), make_room("R2", 35)]
        assert allocator.allocate(30, monday_nine, rooms, []).id == "R1"
        assert allocator.find_optimal(30, monday_nine, rooms, []).id == "R2"

    def test_tie_prefers_smaller_room(self, allocator, monday_nine):
        # 20 students, target 50%: 25 seats -> 80%, 100 seats -> 20%
        rooms = [make_room("R2", 100), make_room("R1", 25)]
        room = allocator.find_optimal(20, monday_nine, rooms, [], target=50.0)
        assert room.id == "R1"

    def test_ignores_busy_and_small_rooms(self, allocator, monday_nine):
        rooms = [make_room("R1", 47), make_room("R2", 20), make_room("R3", 80)]
        taken = make_assignment("1", rooms[0], monday_nine)
        assert allocator.find_optimal(40, monday_nine, rooms, [taken]).id == "R3"

    def test_none_when_nothing_fits(self, allocator, monday_nine):
        assert allocator.find_optimal(100, monday_nine, [make_room("R1", 50)], []) is None
