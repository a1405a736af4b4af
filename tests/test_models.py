"""Tests for data models."""

import pytest

from timetable_engine.exceptions import InvalidInputError
from timetable_engine.models import Assignment, Course, Professor, Room, TimeSlot


class TestCourse:
    """Tests for Course dataclass."""

    def test_from_camel_case(self):
        """Test parsing the camelCase wire format."""
        course = Course.from_dict(
            {"code": "CS701", "name": "Advanced Algorithms", "credits": 4, "enrolledStudents": 48}
        )
        assert course.enrolled_students == 48
        assert course.id == ""

    def test_from_snake_case(self):
        """Test parsing snake_case keys with string numbers."""
        course = Course.from_dict(
            {"code": " CS701 ", "name": "Algo", "credits": "4", "enrolled_students": "48"}
        )
        assert course.code == "CS701"
        assert course.credits == 4
        assert course.enrolled_students == 48

    def test_non_integer_students(self):
        """Test a non-numeric student count is rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            Course.from_dict({"code": "CS1", "name": "X", "enrolledStudents": "many"})
        assert exc_info.value.field == "enrolledStudents"

    def test_boolean_is_not_an_integer(self):
        """Test booleans are not accepted as counts."""
        with pytest.raises(InvalidInputError):
            Course.from_dict({"code": "CS1", "name": "X", "credits": True})

    def test_to_dict(self):
        """Test conversion to dictionary."""
        course = Course("C1", "CS701", "Algo", 4, "CS", 48)
        assert course.to_dict() == {
            "id": "C1",
            "code": "CS701",
            "name": "Algo",
            "credits": 4,
            "department": "CS",
            "enrolledStudents": 48,
        }

    def test_round_trip(self):
        """Test from_dict(to_dict()) preserves the course."""
        course = Course("C1", "CS701", "Algo", 4, "CS", 48)
        assert Course.from_dict(course.to_dict()) == course


class TestRoom:
    """Tests for Room dataclass."""

    def test_type_key(self):
        """Test both 'type' and 'room_type' keys are accepted."""
        assert Room.from_dict({"roomNumber": "101", "capacity": 30, "type": "Lab"}).room_type == "Lab"
        assert Room.from_dict({"room_number": "101", "capacity": 30, "room_type": "Lab"}).room_type == "Lab"

    def test_to_dict_uses_wire_keys(self):
        """Test room serialization keys."""
        data = Room("R1", "101", "Main", 30, "Lab").to_dict()
        assert data["roomNumber"] == "101"
        assert data["type"] == "Lab"


class TestProfessor:
    """Tests for Professor dataclass."""

    def test_missing_fields_default_to_empty(self):
        professor = Professor.from_dict({"name": "Dr. Patil"})
        assert professor.email == ""
        assert professor.department == ""


class TestTimeSlot:
    """Tests for TimeSlot dataclass."""

    def test_normalizes_day_and_time(self):
        """Test day case and hour padding are normalized."""
        slot = TimeSlot("T1", "monday", "9:00", "10:30")
        assert slot.day == "Monday"
        assert slot.start_time == "09:00"

    def test_overlap_is_half_open(self):
        """Test back-to-back slots do not overlap."""
        first = TimeSlot("T1", "Monday", "09:00", "10:30")
        assert first.overlaps(TimeSlot("T2", "Monday", "10:00", "11:00"))
        assert not first.overlaps(TimeSlot("T3", "Monday", "10:30", "11:00"))
        assert not first.overlaps(TimeSlot("T4", "Tuesday", "09:00", "10:30"))

    def test_contained_slot_overlaps(self):
        outer = TimeSlot("T1", "Friday", "08:00", "12:00")
        assert outer.overlaps(TimeSlot("T2", "FRIDAY", "09:00", "09:30"))

    def test_str(self):
        assert str(TimeSlot("T1", "Monday", "09:00", "10:30")) == "Monday 09:00-10:30"

    def test_from_dict(self):
        slot = TimeSlot.from_dict({"id": "T3", "day": "Friday", "startTime": "11:00", "endTime": "12:30"})
        assert slot.to_dict() == {
            "id": "T3",
            "day": "Friday",
            "startTime": "11:00",
            "endTime": "12:30",
        }


class TestAssignment:
    """Tests for Assignment dataclass."""

    @pytest.fixture
    def assignment(self):
        return Assignment(
            id="TE1",
            course=Course("C1", "CS701", "Algo", 4, "CS", 40),
            professor=Professor("P1", "Dr. Patil", "CS", ""),
            room=Room("R2", "102", "Main", 50, "Lecture Hall"),
            time_slot=TimeSlot("T1", "Monday", "09:00", "10:30"),
        )

    def test_key(self, assignment):
        """Test the conflict index key."""
        assert assignment.key == ("monday", "09:00")

    def test_utilization(self, assignment):
        """Test utilization percentage."""
        assert assignment.utilization == pytest.approx(80.0)

    def test_to_record(self, assignment):
        """Test id-only record."""
        assert assignment.to_record() == {
            "id": "TE1",
            "courseId": "C1",
            "professorId": "P1",
            "roomId": "R2",
            "timeSlotId": "T1",
        }

    def test_to_dict_embeds_entities(self, assignment):
        data = assignment.to_dict()
        assert data["course"]["code"] == "CS701"
        assert data["timeSlot"]["startTime"] == "09:00"
