"""CLI entry point for the timetable engine."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .exceptions import InvalidInputError, TimetableError, UnknownIdError
from .exporters import get_exporter
from .models import Assignment, Room
from .scheduler import TimetableRepository, TimetableScheduler, create_scheduler
from .utils import format_utilization, sort_by_weekday

app = typer.Typer(
    name="timetable",
    help="Schedule university classes onto rooms and time slots",
    add_completion=False,
)
console = Console()

# Default paths
DEFAULT_STATE_PATH = Path("data/timetable.json")


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


class CompletionTarget(str, Enum):
    """Prefix index to query."""

    course = "course"
    room = "room"


class EntityList(str, Enum):
    """Reference entity collections."""

    courses = "courses"
    professors = "professors"
    rooms = "rooms"
    timeslots = "timeslots"


StateOption = Annotated[
    Path,
    typer.Option("--state", "-s", help="Timetable state JSON file"),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Reference data directory (CSV files)"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed log output"),
    ] = False,
) -> None:
    """Schedule university classes onto rooms and time slots."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(state: Path, config: Path | None = None) -> TimetableScheduler:
    """Load the scheduler from state, reference data, or sample data."""
    try:
        return create_scheduler(config_dir=config, state_path=state)
    except (TimetableError, OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


def _save(scheduler: TimetableScheduler, state: Path) -> None:
    TimetableRepository(state).save(scheduler)


def _assignment_table(assignments: list[Assignment], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Day", style="cyan")
    table.add_column("Time", style="cyan")
    table.add_column("Course", style="green", max_width=40)
    table.add_column("Professor", style="magenta")
    table.add_column("Room", style="blue")
    table.add_column("Util.", justify="right")

    for a in assignments:
        table.add_row(
            a.id,
            a.time_slot.day,
            f"{a.time_slot.start_time}-{a.time_slot.end_time}",
            f"{a.course.code} {a.course.name}",
            a.professor.name,
            f"{a.room.room_number} ({a.room.capacity})",
            format_utilization(a.utilization),
        )
    return table


def _room_table(rooms: list[Room], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Room", style="cyan")
    table.add_column("Building", style="blue")
    table.add_column("Capacity", style="green", justify="right")
    table.add_column("Type", style="magenta")

    for room in rooms:
        table.add_row(room.id, room.room_number, room.building, str(room.capacity), room.room_type)
    return table


@app.command()
def init(
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing state file"),
    ] = False,
) -> None:
    """Create a state file from reference data or the sample timetable."""
    if state.exists() and not force:
        console.print(
            f"[bold red]Error:[/bold red] {state} already exists (use --force to overwrite)"
        )
        raise typer.Exit(1)

    try:
        scheduler = create_scheduler(config_dir=config)
    except (TimetableError, OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    _save(scheduler, state)
    console.print(
        f"[bold green]✓[/bold green] Initialized {state}: "
        f"{len(scheduler.list_courses())} courses, {len(scheduler.list_rooms())} rooms, "
        f"{len(scheduler.all_scheduled())} scheduled classes"
    )


@app.command()
def schedule(
    course_id: Annotated[str, typer.Argument(help="Course id, e.g. C1")],
    professor_id: Annotated[str, typer.Argument(help="Professor id, e.g. P1")],
    time_slot_id: Annotated[str, typer.Argument(help="Time slot id, e.g. T1")],
    room_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Preferred room type (e.g. Lab)"),
    ] = None,
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Schedule a class into the smallest free room that fits."""
    scheduler = _load(state, config)
    result = scheduler.schedule(course_id, professor_id, time_slot_id, preferred_type=room_type)

    if not result.success:
        console.print(f"[bold red]✗ {result.message}[/bold red]")
        for conflict in result.conflicts:
            console.print(f"  [red]• {conflict}[/red]")
        if result.suggestion:
            console.print(f"  [yellow]{result.suggestion}[/yellow]")
        raise typer.Exit(1)

    _save(scheduler, state)
    entry = result.entry
    console.print(f"[bold green]✓[/bold green] {result.message}")
    console.print(f"  Entry: {entry.id} - {entry.course.code} {entry.course.name}")
    console.print(f"  Time: {entry.time_slot}")
    console.print(f"  Room: {result.room.room_number}, {result.room.building}")
    console.print(f"  Utilization: {format_utilization(result.utilization)}")


@app.command()
def unschedule(
    assignment_id: Annotated[str, typer.Argument(help="Assignment id, e.g. TE3")],
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Remove a scheduled class."""
    scheduler = _load(state, config)
    if not scheduler.unschedule(assignment_id):
        console.print(f"[bold red]Error:[/bold red] Unknown assignment: {assignment_id}")
        raise typer.Exit(1)

    _save(scheduler, state)
    console.print(f"[bold green]✓[/bold green] Removed {assignment_id}")


@app.command()
def complete(
    target: Annotated[CompletionTarget, typer.Argument(help="Index to search")],
    prefix: Annotated[str, typer.Argument(help="Prefix (case-insensitive)")],
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Auto-complete course codes/names or room numbers/buildings."""
    scheduler = _load(state, config)
    if target == CompletionTarget.course:
        matches = scheduler.auto_complete_course(prefix)
    else:
        matches = scheduler.auto_complete_room(prefix)

    if not matches:
        console.print(f"[yellow]No matches for '{prefix}'[/yellow]")
        return
    for match in matches:
        console.print(match)


@app.command()
def available(
    time_slot_id: Annotated[str, typer.Argument(help="Time slot id, e.g. T1")],
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """List rooms that are free at a time slot."""
    scheduler = _load(state, config)
    try:
        time_slot = scheduler.store.require_time_slot(time_slot_id)
    except UnknownIdError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    rooms = scheduler.available_rooms(time_slot_id)
    console.print(_room_table(rooms, f"Free rooms at {time_slot}"))


@app.command()
def optimal(
    course_id: Annotated[str, typer.Argument(help="Course id, e.g. C1")],
    time_slot_id: Annotated[str, typer.Argument(help="Time slot id, e.g. T1")],
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Suggest the free room with utilization closest to 85%."""
    scheduler = _load(state, config)
    try:
        course = scheduler.store.require_course(course_id)
        scheduler.store.require_time_slot(time_slot_id)
    except UnknownIdError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    room = scheduler.optimal_room(course_id, time_slot_id)
    if room is None:
        console.print("[bold red]✗ No suitable room[/bold red]")
        raise typer.Exit(1)

    utilization = scheduler.allocator.utilization(course.enrolled_students, room)
    console.print(
        f"{room.id}: {room.room_number}, {room.building} "
        f"({room.capacity} seats, {format_utilization(utilization)})"
    )


@app.command()
def show(
    day: Annotated[
        Optional[str],
        typer.Option("--day", "-d", help="Only show one weekday"),
    ] = None,
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Show the timetable, Monday to Sunday."""
    scheduler = _load(state, config)
    if day:
        assignments = scheduler.schedule_by_day(day)
        title = f"Timetable: {day.capitalize()}"
    else:
        assignments = sort_by_weekday(scheduler.all_scheduled())
        title = "Timetable"

    if not assignments:
        console.print("[yellow]No classes scheduled[/yellow]")
        return
    console.print(_assignment_table(assignments, title))


@app.command("list")
def list_entities(
    kind: Annotated[EntityList, typer.Argument(help="Collection to list")],
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """List courses, professors, rooms or time slots."""
    scheduler = _load(state, config)

    if kind == EntityList.rooms:
        console.print(_room_table(scheduler.list_rooms(), "Rooms"))
        return

    table = Table(title=kind.value.capitalize())
    if kind == EntityList.courses:
        for column in ("ID", "Code", "Name", "Credits", "Department", "Students"):
            table.add_column(column)
        for c in scheduler.list_courses():
            table.add_row(c.id, c.code, c.name, str(c.credits), c.department, str(c.enrolled_students))
    elif kind == EntityList.professors:
        for column in ("ID", "Name", "Department", "Email"):
            table.add_column(column)
        for p in scheduler.list_professors():
            table.add_row(p.id, p.name, p.department, p.email)
    else:
        for column in ("ID", "Day", "Start", "End"):
            table.add_column(column)
        for t in scheduler.list_time_slots():
            table.add_row(t.id, t.day, t.start_time, t.end_time)
    console.print(table)


def _add(scheduler: TimetableScheduler, state: Path, adder, payload: dict) -> None:
    try:
        created = adder(payload)
    except InvalidInputError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    _save(scheduler, state)
    console.print(f"[bold green]✓[/bold green] Created {created.id}")


@app.command("add-course")
def add_course(
    code: Annotated[str, typer.Option("--code", help="Course code, e.g. CS701")],
    name: Annotated[str, typer.Option("--name", help="Course title")],
    students: Annotated[int, typer.Option("--students", help="Enrolled students")],
    credits: Annotated[int, typer.Option("--credits", help="Credit points")] = 3,
    department: Annotated[str, typer.Option("--department", help="Department")] = "",
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Add a course."""
    scheduler = _load(state, config)
    payload = {
        "code": code,
        "name": name,
        "credits": credits,
        "department": department,
        "enrolled_students": students,
    }
    _add(scheduler, state, scheduler.add_course, payload)


@app.command("add-professor")
def add_professor(
    name: Annotated[str, typer.Option("--name", help="Full name")],
    department: Annotated[str, typer.Option("--department", help="Department")] = "",
    email: Annotated[str, typer.Option("--email", help="Email address")] = "",
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Add a professor."""
    scheduler = _load(state, config)
    payload = {"name": name, "department": department, "email": email}
    _add(scheduler, state, scheduler.add_professor, payload)


@app.command("add-room")
def add_room(
    number: Annotated[str, typer.Option("--number", help="Room number, e.g. 101")],
    capacity: Annotated[int, typer.Option("--capacity", help="Seats")],
    building: Annotated[str, typer.Option("--building", help="Building name")] = "",
    room_type: Annotated[str, typer.Option("--type", help="Room type")] = "Lecture Hall",
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Add a room."""
    scheduler = _load(state, config)
    payload = {
        "room_number": number,
        "building": building,
        "capacity": capacity,
        "room_type": room_type,
    }
    _add(scheduler, state, scheduler.add_room, payload)


@app.command("add-timeslot")
def add_timeslot(
    day: Annotated[str, typer.Option("--day", help="Weekday name")],
    start: Annotated[str, typer.Option("--start", help="Start time HH:MM")],
    end: Annotated[str, typer.Option("--end", help="End time HH:MM")],
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Add a time slot."""
    scheduler = _load(state, config)
    payload = {"day": day, "start_time": start, "end_time": end}
    _add(scheduler, state, scheduler.add_time_slot, payload)


@app.command()
def stats(
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Show room utilization statistics."""
    scheduler = _load(state, config)
    statistics = scheduler.statistics()

    overview_table = Table(title="Overview", show_header=False)
    overview_table.add_column("Metric", style="cyan")
    overview_table.add_column("Value", style="green")
    overview_table.add_row("Scheduled Classes", str(statistics.total_assignments))
    overview_table.add_row("Rooms", str(statistics.total_rooms))
    overview_table.add_row("Rooms In Use", str(statistics.rooms_in_use))
    overview_table.add_row(
        "Average Utilization", format_utilization(statistics.average_utilization)
    )
    console.print(overview_table)

    if statistics.by_day:
        day_table = Table(title="Classes by Day")
        day_table.add_column("Day", style="cyan")
        day_table.add_column("Count", style="green")
        for day, count in statistics.by_day.items():
            day_table.add_row(day, str(count))
        console.print(day_table)


@app.command()
def export(
    output: Annotated[
        Path,
        typer.Option("-o", "--output", help="Output file or directory path"),
    ],
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    state: StateOption = DEFAULT_STATE_PATH,
    config: ConfigOption = None,
) -> None:
    """Export the timetable to JSON, CSV or Excel."""
    scheduler = _load(state, config)
    exporter = get_exporter(format.value)

    if format == OutputFormat.csv:
        # CSV exports to directory
        output_path = output if output.is_dir() or not output.suffix else output.parent / output.stem
    else:
        suffix = ".xlsx" if format == OutputFormat.excel else ".json"
        output_path = output if output.suffix else output.with_suffix(suffix)

    with console.status(f"[bold green]Exporting to {format.value}..."):
        exporter.export(scheduler, output_path)

    console.print(f"[bold green]✓[/bold green] Exported to: {output_path}")


if __name__ == "__main__":
    app()
