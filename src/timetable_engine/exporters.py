"""Export functionality for scheduled timetables."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import pandas as pd

from .scheduler import TimetableScheduler
from .utils import format_utilization, sort_by_weekday


ASSIGNMENT_COLUMNS = [
    "id",
    "day",
    "start_time",
    "end_time",
    "course_code",
    "course_name",
    "professor",
    "room",
    "building",
    "capacity",
    "enrolled_students",
    "utilization",
]


def _assignment_rows(scheduler: TimetableScheduler) -> list[dict[str, Any]]:
    """Flatten assignments into rows, Monday to Sunday."""
    rows = []
    for assignment in sort_by_weekday(scheduler.all_scheduled()):
        rows.append(
            {
                "id": assignment.id,
                "day": assignment.time_slot.day,
                "start_time": assignment.time_slot.start_time,
                "end_time": assignment.time_slot.end_time,
                "course_code": assignment.course.code,
                "course_name": assignment.course.name,
                "professor": assignment.professor.name,
                "room": assignment.room.room_number,
                "building": assignment.room.building,
                "capacity": assignment.room.capacity,
                "enrolled_students": assignment.course.enrolled_students,
                "utilization": format_utilization(assignment.utilization),
            }
        )
    return rows


def _summary_rows(scheduler: TimetableScheduler) -> list[dict[str, Any]]:
    stats = scheduler.statistics()
    return [
        {"metric": "total_assignments", "value": stats.total_assignments},
        {"metric": "total_rooms", "value": stats.total_rooms},
        {"metric": "rooms_in_use", "value": stats.rooms_in_use},
        {"metric": "average_utilization", "value": format_utilization(stats.average_utilization)},
    ]


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, scheduler: TimetableScheduler, output_path: str | Path) -> None:
        """Export the timetable to file.

        Args:
            scheduler: Scheduler whose committed assignments are exported
            output_path: Path to output file or directory
        """
        pass


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, scheduler: TimetableScheduler, output_path: str | Path) -> None:
        """Export assignments and statistics to a JSON file."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        document = {
            "assignments": [
                a.to_dict() for a in sort_by_weekday(scheduler.all_scheduled())
            ],
            "statistics": scheduler.statistics().to_dict(),
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=self.indent, ensure_ascii=self.ensure_ascii)


class CSVExporter(BaseExporter):
    """Export to CSV format (multiple files)."""

    def export(self, scheduler: TimetableScheduler, output_path: str | Path) -> None:
        """Export to CSV files.

        Creates two files:
        - assignments.csv: One row per scheduled class
        - summary.csv: Utilization summary
        """
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._write_csv(
            output_dir / "assignments.csv", _assignment_rows(scheduler), ASSIGNMENT_COLUMNS
        )
        self._write_csv(output_dir / "summary.csv", _summary_rows(scheduler), ["metric", "value"])

    def _write_csv(self, output_path: Path, rows: list[dict], fieldnames: list[str]) -> None:
        """Write rows to CSV file (header only when there are no rows)."""
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (single workbook with multiple sheets)."""

    def export(self, scheduler: TimetableScheduler, output_path: str | Path) -> None:
        """Export to an Excel workbook.

        Creates workbook with sheets:
        - Timetable: Scheduled classes, Monday to Sunday
        - Rooms: Room list with number of classes per room
        - Summary: Utilization summary
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._export_timetable_sheet(scheduler, writer)
            self._export_rooms_sheet(scheduler, writer)
            self._export_summary_sheet(scheduler, writer)

    def _export_timetable_sheet(
        self, scheduler: TimetableScheduler, writer: pd.ExcelWriter
    ) -> None:
        rows = _assignment_rows(scheduler)
        df = pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS)
        df.columns = [c.replace("_", " ").title() for c in df.columns]
        df.to_excel(writer, sheet_name="Timetable", index=False)

    def _export_rooms_sheet(
        self, scheduler: TimetableScheduler, writer: pd.ExcelWriter
    ) -> None:
        by_room = scheduler.statistics().by_room
        rows = [
            {
                "ID": room.id,
                "Room": room.room_number,
                "Building": room.building,
                "Capacity": room.capacity,
                "Type": room.room_type,
                "Classes": by_room.get(room.id, 0),
            }
            for room in scheduler.list_rooms()
        ]
        df = pd.DataFrame(rows) if rows else pd.DataFrame(
            columns=["ID", "Room", "Building", "Capacity", "Type", "Classes"]
        )
        df.to_excel(writer, sheet_name="Rooms", index=False)

    def _export_summary_sheet(
        self, scheduler: TimetableScheduler, writer: pd.ExcelWriter
    ) -> None:
        rows = [
            {"Metric": row["metric"].replace("_", " ").title(), "Value": row["value"]}
            for row in _summary_rows(scheduler)
        ]
        pd.DataFrame(rows).to_excel(writer, sheet_name="Summary", index=False)


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
