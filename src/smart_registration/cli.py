"""CLI entry point for Smart Registration."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .catalog import Catalog, get_stats, load_catalog
from .constants import DEFAULT_DAYS, WEEKDAYS
from .exceptions import ConfigError, InvalidFiltersError
from .exporters import get_exporter
from .planner import (
    Filters,
    GenerationResult,
    GenerationStatus,
    PlannerSession,
    RankedResult,
    ScheduleRequest,
    build_timetable,
    load_config,
)
from .planner.constants import (
    DEFAULT_END_TIME,
    DEFAULT_MAX_DAYS,
    DEFAULT_MAX_GAP,
    DEFAULT_START_TIME,
)

app = typer.Typer(
    name="smart-registration",
    help="Plan conflict-free class schedules from a scanned registration page",
    add_completion=False,
)
console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _normalize_day(day: str) -> str:
    """Match a day label case-insensitively against known weekdays."""
    for known in WEEKDAYS:
        if known.lower() == day.strip().lower()[:3]:
            return known
    return day.strip()


def _load_catalog_or_exit(input_file: Path) -> Catalog:
    with console.status("[bold green]Loading scanned catalog..."):
        catalog = load_catalog(input_file)

    if catalog.scan_failed:
        console.print(f"[bold red]Error:[/bold red] {catalog.errors[0]}")
        raise typer.Exit(1)

    return catalog


@app.command()
def scan(
    input_file: Annotated[
        Path,
        typer.Argument(help="Scanned sections JSON file"),
    ],
    search: Annotated[
        Optional[str],
        typer.Option("-s", "--search", help="Only list courses whose code or name matches"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Summarize the courses and sections found in a scan."""
    _configure_logging(verbose)
    catalog = _load_catalog_or_exit(input_file)
    statistics = get_stats(catalog)

    console.print(
        f"\nFound {catalog.total_courses} courses with {catalog.total_open} open sections"
    )
    console.print(f"  Total sections: {catalog.total_sections}")

    courses = catalog.search(search) if search else catalog.courses

    course_table = Table(title="Courses")
    course_table.add_column("Code", style="cyan")
    course_table.add_column("Name", style="blue", max_width=40)
    course_table.add_column("Sections", style="green")
    course_table.add_column("Open", style="green")

    for course in courses:
        counts = statistics["by_course"].get(course.code, {"sections": 0, "open": 0})
        course_table.add_row(
            course.code, course.name, str(counts["sections"]), str(counts["open"])
        )

    console.print(course_table)

    if catalog.errors:
        console.print(f"\n[bold red]Dropped records ({len(catalog.errors)}):[/bold red]")
        for error in catalog.errors:
            console.print(f"  [red]• {error}[/red]")

    if catalog.warnings and verbose:
        console.print(f"\n[bold yellow]Warnings ({len(catalog.warnings)}):[/bold yellow]")
        for warning in catalog.warnings:
            console.print(f"  [yellow]• {warning}[/yellow]")


@app.command()
def generate(
    input_file: Annotated[
        Path,
        typer.Argument(help="Scanned sections JSON file"),
    ],
    course: Annotated[
        Optional[List[str]],
        typer.Option("-c", "--course", help="Course code to include (repeatable)"),
    ] = None,
    day: Annotated[
        Optional[List[str]],
        typer.Option("-d", "--day", help="Allowed day, e.g. Mon (repeatable; default Mon-Fri)"),
    ] = None,
    start: Annotated[
        str,
        typer.Option("--start", help="Earliest class start, HH:MM"),
    ] = DEFAULT_START_TIME,
    end: Annotated[
        str,
        typer.Option("--end", help="Latest class end, HH:MM"),
    ] = DEFAULT_END_TIME,
    max_days: Annotated[
        int,
        typer.Option("--max-days", help="Preferred maximum number of days"),
    ] = DEFAULT_MAX_DAYS,
    max_gap: Annotated[
        int,
        typer.Option("--max-gap", help="Preferred maximum gap"),
    ] = DEFAULT_MAX_GAP,
    yes: Annotated[
        bool,
        typer.Option("-y", "--yes", help="Drop courses that fit no preference without asking"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file or directory path"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    show: Annotated[
        Optional[int],
        typer.Option("--show", help="Print the weekly timetable of option N"),
    ] = None,
    apply: Annotated[
        Optional[int],
        typer.Option("--apply", help="Enroll option N into the enrollment cart"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="JSON file overriding planner limits"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Generate ranked conflict-free schedules for the selected courses."""
    _configure_logging(verbose)

    try:
        planner_config = load_config(config)
    except ConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    catalog = _load_catalog_or_exit(input_file)

    try:
        filters = Filters(
            days=frozenset(_normalize_day(d) for d in (day or DEFAULT_DAYS)),
            start_time=start,
            end_time=end,
            max_days=max_days,
            max_gap=max_gap,
        )
    except InvalidFiltersError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    session = PlannerSession(catalog, planner_config)
    request = ScheduleRequest(selected_courses=tuple(course or []), filters=filters)

    with console.status("[bold green]Applying filters..."):
        result = session.generate(request)

    if result.status == GenerationStatus.EXCLUSIONS_PENDING:
        console.print(f"\n[bold yellow]{result.message}:[/bold yellow]")
        for excluded in result.excluded_courses:
            console.print(f"  [yellow]- {excluded.name} ({excluded.code})[/yellow]")

        if yes or typer.confirm("Continue without these courses?", default=False):
            with console.status("[bold green]Generating schedules..."):
                result = session.confirm_exclusions()
        else:
            session.cancel()
            console.print("Generation cancelled")
            raise typer.Exit(1)

    if not result.ok:
        console.print(f"[bold red]Error:[/bold red] {result.message}")
        raise typer.Exit(1)

    _show_results(result, verbose)

    if show is not None:
        option = _pick_option(result, show)
        grid = build_timetable(option.sections, filters.ordered_days)
        _show_timetable(grid, f"Timetable #{show}")

    if output:
        exporter = get_exporter(format.value)

        if format == OutputFormat.csv:
            # CSV exports to directory
            output_path = output if output.is_dir() else output.parent / output.stem
        else:
            if not output.suffix:
                suffix = "xlsx" if format == OutputFormat.excel else format.value
                output = output.with_suffix(f".{suffix}")
            output_path = output

        with console.status(f"[bold green]Exporting to {format.value}..."):
            exporter.export(result, output_path)

        console.print(f"\n[bold green]✓[/bold green] Exported to: {output_path}")

    if apply is not None:
        option = _pick_option(result, apply)
        cart = session.create_cart()
        with console.status("[bold green]Applying schedule..."):
            report = session.apply(option, cart)

        if report.success:
            console.print(
                f"\n[bold green]✓[/bold green] Schedule applied: "
                f"{len(report.enrolled)} section(s) in the enrollment cart"
            )
        else:
            console.print("\n[bold red]Error applying schedule[/bold red]")
            for section_id in report.failed:
                console.print(f"  [red]• {section_id}[/red]")
            raise typer.Exit(1)


def _pick_option(result: GenerationResult, number: int) -> RankedResult:
    if not 1 <= number <= result.total_results:
        console.print(
            f"[bold red]Error:[/bold red] Option {number} does not exist "
            f"(1-{result.total_results})"
        )
        raise typer.Exit(1)
    return result.ranked_results[number - 1]


def _show_results(result: GenerationResult, verbose: bool) -> None:
    """Show ranked options in a table."""
    console.print(f"\n[bold green]{result.message}[/bold green]")

    if result.excluded_courses:
        names = ", ".join(c.name for c in result.excluded_courses)
        console.print(f"[yellow]Excluded: {names}[/yellow]")

    results_table = Table(title="Schedule Options")
    results_table.add_column("Option", style="cyan")
    results_table.add_column("Score", style="green")
    results_table.add_column("Days", style="magenta")
    results_table.add_column("Courses", style="blue")
    results_table.add_column("Sections", style="white")

    for index, option in enumerate(result.ranked_results, start=1):
        results_table.add_row(
            f"#{index}",
            str(option.score),
            str(option.days),
            str(len(option.sections)),
            ", ".join(s.section_id for s in option.sections),
        )

    console.print(results_table)

    if verbose:
        stats = result.statistics
        console.print(f"\n  Combinations: {stats.naive_combinations}")
        if stats.truncated:
            console.print(
                f"  Limited to {stats.per_course_limit} sections per course "
                f"({stats.enumerated_combinations} enumerated)"
            )
        console.print(f"  Checked: {stats.combinations_checked}")
        console.print(f"  Conflict-free: {stats.valid_schedules}")


def _show_timetable(grid, title: str) -> None:
    """Render a timetable DataFrame."""
    table = Table(title=title)
    table.add_column(grid.index.name or "Time", style="cyan")
    for column in grid.columns:
        table.add_column(str(column), style="green")

    for hour, row in grid.iterrows():
        table.add_row(str(hour), *[str(value) for value in row])

    console.print(table)


if __name__ == "__main__":
    app()
