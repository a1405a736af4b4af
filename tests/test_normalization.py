"""Tests for normalization functions."""

from timetable_engine.normalization import (
    days_equal,
    normalize_day,
    normalize_search_term,
    normalize_time,
)


class TestNormalizeDay:
    """Tests for normalize_day function."""

    def test_canonical_case(self):
        """Test weekday names become title case."""
        assert normalize_day("monday") == "Monday"
        assert normalize_day("  TUESDAY ") == "Tuesday"

    def test_unknown_day_is_stripped(self):
        """Test non-weekdays pass through for the validator to reject."""
        assert normalize_day(" Funday ") == "Funday"

    def test_empty(self):
        assert normalize_day("") == ""


class TestDaysEqual:
    """Tests for days_equal function."""

    def test_case_insensitive(self):
        assert days_equal("Monday", "MONDAY")
        assert not days_equal("Monday", "Tuesday")


class TestNormalizeTime:
    """Tests for normalize_time function."""

    def test_pads_single_digit_hour(self):
        assert normalize_time("9:00") == "09:00"

    def test_keeps_padded_time(self):
        assert normalize_time(" 14:30 ") == "14:30"

    def test_leaves_garbage_alone(self):
        assert normalize_time("noon") == "noon"


class TestNormalizeSearchTerm:
    """Tests for normalize_search_term function."""

    def test_upper_case(self):
        assert normalize_search_term("cs70") == "CS70"
        assert normalize_search_term("") == ""
