"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from timetable_engine.cli import app

runner = CliRunner()


@pytest.fixture
def state(tmp_path):
    """Path to a state file initialized with the sample timetable."""
    path = tmp_path / "timetable.json"
    result = runner.invoke(app, ["init", "--state", str(path)])
    assert result.exit_code == 0, result.output
    return path


def _assignment_ids(path):
    data = json.loads(path.read_text(encoding="utf-8"))
    return [a["id"] for a in data["assignments"]]


class TestInit:
    """Tests for the init command."""

    def test_creates_state(self, state):
        assert state.exists()
        assert len(_assignment_ids(state)) == 7

    def test_refuses_overwrite(self, state):
        result = runner.invoke(app, ["init", "--state", str(state)])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force_overwrite(self, state):
        result = runner.invoke(app, ["init", "--state", str(state), "--force"])
        assert result.exit_code == 0

    def test_from_config_dir(self, tmp_path):
        config = tmp_path / "reference"
        config.mkdir()
        (config / "rooms.csv").write_text(
            "room_number,building,capacity,type\n101,Main,30,Lab\n", encoding="utf-8"
        )
        path = tmp_path / "state.json"
        result = runner.invoke(app, ["init", "--state", str(path), "--config", str(config)])
        assert result.exit_code == 0
        assert _assignment_ids(path) == []

    def test_from_undecodable_config(self, tmp_path):
        config = tmp_path / "reference"
        config.mkdir()
        (config / "rooms.csv").write_bytes(b"room_number,building\n\xff\xfe,Main\n")
        path = tmp_path / "state.json"

        result = runner.invoke(app, ["init", "--state", str(path), "--config", str(config)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not path.exists()


class TestSchedule:
    """Tests for schedule and unschedule commands."""

    def test_schedule_success(self, state):
        result = runner.invoke(app, ["schedule", "C1", "P2", "T8", "--state", str(state)])
        assert result.exit_code == 0, result.output
        assert "Class scheduled successfully" in result.output
        assert "TE8" in _assignment_ids(state)

    def test_schedule_conflict(self, state):
        result = runner.invoke(app, ["schedule", "C2", "P1", "T1", "--state", str(state)])
        assert result.exit_code == 1
        assert "Scheduling conflict detected" in result.output
        assert len(_assignment_ids(state)) == 7

    def test_schedule_unknown_id(self, state):
        result = runner.invoke(app, ["schedule", "C99", "P1", "T1", "--state", str(state)])
        assert result.exit_code == 1
        assert "Invalid course, professor, or time slot" in result.output

    def test_unschedule(self, state):
        result = runner.invoke(app, ["unschedule", "TE1", "--state", str(state)])
        assert result.exit_code == 0
        assert "TE1" not in _assignment_ids(state)

        result = runner.invoke(app, ["unschedule", "TE1", "--state", str(state)])
        assert result.exit_code == 1


class TestQueries:
    """Tests for read-only commands."""

    def test_complete_course(self, state):
        result = runner.invoke(app, ["complete", "course", "cs702", "--state", str(state)])
        assert result.exit_code == 0
        assert result.output.split() == ["CS702", "CS702L"]

    def test_complete_no_match(self, state):
        result = runner.invoke(app, ["complete", "room", "zzz", "--state", str(state)])
        assert result.exit_code == 0
        assert "No matches" in result.output

    def test_available_unknown_slot(self, state):
        result = runner.invoke(app, ["available", "T99", "--state", str(state)])
        assert result.exit_code == 1

    def test_optimal(self, state):
        result = runner.invoke(app, ["optimal", "C1", "T8", "--state", str(state)])
        assert result.exit_code == 0
        assert "%" in result.output

    def test_optimal_unknown_course(self, state):
        result = runner.invoke(app, ["optimal", "C99", "T1", "--state", str(state)])
        assert result.exit_code == 1
        assert "C99" in result.output

    def test_show_day(self, state):
        result = runner.invoke(app, ["show", "--day", "sunday", "--state", str(state)])
        assert result.exit_code == 0
        assert "No classes scheduled" in result.output

    def test_stats(self, state):
        result = runner.invoke(app, ["stats", "--state", str(state)])
        assert result.exit_code == 0
        assert "Overview" in result.output

    def test_corrupt_state(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["stats", "--state", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestAddCommands:
    """Tests for add-* commands."""

    def test_add_room(self, state):
        result = runner.invoke(
            app,
            ["add-room", "--number", "901", "--capacity", "120", "--state", str(state)],
        )
        assert result.exit_code == 0
        assert "Created R73" in result.output

    def test_add_room_invalid(self, state):
        result = runner.invoke(
            app,
            ["add-room", "--number", "901", "--capacity", "0", "--state", str(state)],
        )
        assert result.exit_code == 1
        assert "capacity" in result.output

    def test_add_course_and_schedule(self, state):
        runner.invoke(
            app,
            ["add-course", "--code", "CS799", "--name", "Seminar", "--students", "12",
             "--state", str(state)],
        )
        runner.invoke(
            app,
            ["add-timeslot", "--day", "saturday", "--start", "9:00", "--end", "11:00",
             "--state", str(state)],
        )
        result = runner.invoke(app, ["schedule", "C8", "P1", "T10", "--state", str(state)])
        assert result.exit_code == 0, result.output


class TestExport:
    """Tests for the export command."""

    def test_export_json(self, state, tmp_path):
        output = tmp_path / "export"
        result = runner.invoke(app, ["export", "-o", str(output), "--state", str(state)])
        assert result.exit_code == 0
        data = json.loads((tmp_path / "export.json").read_text(encoding="utf-8"))
        assert len(data["assignments"]) == 7

    def test_export_csv(self, state, tmp_path):
        output = tmp_path / "csv_out"
        result = runner.invoke(app, ["export", "-o", str(output), "-f", "csv", "--state", str(state)])
        assert result.exit_code == 0
        assert (output / "assignments.csv").exists()
