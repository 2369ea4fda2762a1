"""Command-line interface for the training plan.

Generates the configured plan and prints it as a table or JSON. Completion
and override inputs are read from JSON files in the persisted shapes:
a list of ISO dates, and a mapping of ISO date -> {"activities": [...]}.
"""

import json
from datetime import date
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from couch_to_mcg.config.settings import settings
from couch_to_mcg.core.logger import configure_logging
from couch_to_mcg.plans.calendar import PlanCalendar
from couch_to_mcg.plans.progress import all_time_stats, find_day, progress_summary, weekly_stats
from couch_to_mcg.plans.schedule import generate_schedule, schedule_to_json
from couch_to_mcg.plans.tips import random_tip
from couch_to_mcg.plans.types import RunLog, TrainingDay

app = typer.Typer(help="Couch to MCG training plan", no_args_is_help=True)
console = Console()

PHASE_STYLES = {
    "Base Building": "green",
    "Strength & Power": "yellow",
    "Taper & Peak": "magenta",
}


@app.callback()
def main() -> None:
    configure_logging(settings)


def _load_json(path: Path | None, default: Any) -> Any:
    if path is None:
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise typer.BadParameter(f"Cannot read JSON from {path}: {e}") from e


def _parse_date(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Expected an ISO date (YYYY-MM-DD), got {value!r}") from e


def _build_schedule(completed: Path | None, overrides: Path | None) -> list[TrainingDay]:
    calendar = PlanCalendar.from_settings()
    schedule = generate_schedule(
        _load_json(completed, []),
        _load_json(overrides, {}),
        calendar=calendar,
    )
    if not schedule:
        console.print(
            f"[red]Plan Error: start date {calendar.start_date.isoformat()} must not be after "
            f"race date {calendar.race_date.isoformat()}.[/red]"
        )
        raise typer.Exit(code=1)
    return schedule


def _format_activities(day: TrainingDay) -> str:
    parts = []
    for activity in day.activities:
        label = activity.activity
        if activity.distance_km is not None:
            label = f"{label} ({activity.distance_km:.1f} km)"
        parts.append(label)
    return " + ".join(parts)


def _render_table(days: list[TrainingDay]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Date")
    table.add_column("Day")
    table.add_column("Phase")
    table.add_column("Activities")
    table.add_column("Done", justify="center")
    for day in days:
        style = PHASE_STYLES.get(day.phase.value, "")
        table.add_row(
            day.iso_date,
            day.date.strftime("%a"),
            f"[{style}]{day.phase.value}[/{style}]" if style else day.phase.value,
            _format_activities(day),
            "✓" if day.is_completed else "",
        )
    return table


@app.command()
def schedule(
    completed: Path | None = typer.Option(None, "--completed", "-c", help="JSON list of completed ISO dates"),
    overrides: Path | None = typer.Option(None, "--overrides", "-o", help="JSON mapping of ISO date to override"),
    start: str | None = typer.Option(None, "--start", help="First date to show (YYYY-MM-DD)"),
    end: str | None = typer.Option(None, "--end", help="Last date to show (YYYY-MM-DD)"),
    as_json: bool = typer.Option(False, "--json", help="Print the schedule as JSON"),
) -> None:
    """Print the training schedule."""
    days = _build_schedule(completed, overrides)
    start_date = _parse_date(start)
    end_date = _parse_date(end)
    days = [
        d for d in days if (start_date is None or d.date >= start_date) and (end_date is None or d.date <= end_date)
    ]

    if as_json:
        typer.echo(json.dumps(schedule_to_json(days), indent=2))
        return
    console.print(_render_table(days))


@app.command()
def day(
    on: str = typer.Argument(..., help="Date to show (YYYY-MM-DD)"),
    completed: Path | None = typer.Option(None, "--completed", "-c", help="JSON list of completed ISO dates"),
    overrides: Path | None = typer.Option(None, "--overrides", "-o", help="JSON mapping of ISO date to override"),
) -> None:
    """Show the plan for a single date."""
    target = _parse_date(on)
    found = find_day(_build_schedule(completed, overrides), target)
    if found is None:
        console.print(f"[yellow]{on} is outside the training plan.[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"[bold]{found.iso_date}[/bold] - {found.phase.value}{' (done)' if found.is_completed else ''}")
    for activity in found.activities:
        distance = f" {activity.distance_km:.1f} km" if activity.distance_km is not None else ""
        console.print(f"  • {activity.activity}{distance}: {activity.description}")


@app.command()
def stats(
    completed: Path | None = typer.Option(None, "--completed", "-c", help="JSON list of completed ISO dates"),
    overrides: Path | None = typer.Option(None, "--overrides", "-o", help="JSON mapping of ISO date to override"),
    logs: Path | None = typer.Option(None, "--logs", "-l", help="JSON mapping of ISO date to run log"),
    today: str | None = typer.Option(None, "--today", help="Treat this date as today (YYYY-MM-DD)"),
) -> None:
    """Show overall progress and the last seven days."""
    days = _build_schedule(completed, overrides)
    run_logs = {d: RunLog.model_validate(entry) for d, entry in _load_json(logs, {}).items()}

    progress = progress_summary(days)
    week = weekly_stats(days, run_logs, today=_parse_date(today))
    overall = all_time_stats(days)

    console.print(
        f"[bold]Progress:[/bold] {progress.completed_training_days}/{progress.training_days} sessions ({progress.percent}%)"
    )
    console.print(
        f"[bold]Last 7 days:[/bold] {week.completed_count}/{week.total_scheduled} sessions, "
        f"{week.distance_km:.1f} km, avg effort {week.avg_effort:.1f}"
    )
    console.print(
        f"[bold]All time:[/bold] {overall.total_distance_km:.1f} km, longest {overall.longest_run_km:.1f} km, "
        f"{overall.total_sessions} sessions"
    )


@app.command()
def tip() -> None:
    """Print a random race-preparation tip."""
    chosen = random_tip()
    console.print(f"[cyan]{chosen.category}:[/cyan] {chosen.content}")


if __name__ == "__main__":
    app()
