"""weekplan CLI - weekly study/work session planner."""

import json
import logging
import sys
from datetime import date

import click

from .config import ConfigError, load_config
from .core.errors import ValidationError
from .core.intervals import DAY_NAMES
from .core.schedule import GeneratedSchedule, week_monday
from .core.tasks import priority_score, sort_by_urgency
from .core.chunker import chunk_task
from .workflows import (
    build_weekly_schedule,
    get_schedule_store,
    load_tasks,
    week_free_slots,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM-DD date")


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="weekplan")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """weekplan - fit your tasks into this week's free time."""
    level = logging.DEBUG if debug else getattr(logging, load_config().log_level, logging.INFO)
    logging.basicConfig(format=LOG_FORMAT, level=level)


def _show_schedule(schedule: GeneratedSchedule, as_json: bool, empty_msg: str) -> None:
    """Shared schedule display logic."""
    if as_json:
        click.echo(json.dumps(schedule.to_dict(), indent=2))
        return

    if not schedule.sessions:
        click.echo(empty_msg)
        return

    first = True
    for day, sessions in schedule.sessions_by_day().items():
        if not first:
            click.echo()
        first = False
        click.echo(f"### {day.strftime('%A, %B %d')}")
        for s in sessions:
            part = f" ({s.chunk_index}/{s.total_chunks})" if s.total_chunks > 1 else ""
            click.echo(f"  {s.format_time():11} {s.title}{part}")


@main.command()
@click.option("--today", "today_str", default=None, help="Anchor date (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--save/--no-save", default=True, help="Store the generated schedule")
def schedule(today_str: str | None, as_json: bool, save: bool):
    """Generate this week's sessions."""
    config = load_config()
    today = _parse_date(today_str)
    try:
        generated = build_weekly_schedule(config, today)
    except (ValidationError, ConfigError) as e:
        _fail(e)

    if save:
        generated = get_schedule_store(config).save(generated)

    _show_schedule(generated, as_json, "Nothing to schedule this week.")
    if as_json:
        return

    if generated.unscheduled:
        click.echo("\nDid not fit this week:")
        for item in generated.unscheduled:
            click.echo(f"  - {item.task.title} ({item.missing_chunks} of {item.total_chunks} chunks)")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def slots(as_json: bool):
    """Show free time per day after buffering busy blocks."""
    config = load_config()
    try:
        week = week_free_slots(config)
    except (ValidationError, ConfigError) as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    DAY_NAMES[i]: [{"start": s.start, "end": s.end, "duration": s.duration} for s in day]
                    for i, day in enumerate(week)
                },
                indent=2,
            )
        )
        return

    for i, day in enumerate(week):
        click.echo(f"{DAY_NAMES[i]}:")
        if not day:
            click.echo("  (no free time)")
        for s in day:
            click.echo(f"  {s.format()}")


@main.command()
@click.option("--today", "today_str", default=None, help="Anchor date (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(today_str: str | None, as_json: bool):
    """List tasks in scheduling order."""
    config = load_config()
    today = _parse_date(today_str)
    try:
        ordered = sort_by_urgency(load_tasks(config), today)
    except (ValidationError, ConfigError) as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": t.id,
                        "title": t.title,
                        "priority": t.priority.value,
                        "due_date": t.due_date.isoformat() if t.due_date else None,
                        "estimated_hours": t.estimated_hours,
                        "score": priority_score(t, today),
                        "overdue": t.is_overdue(today),
                        "chunks": len(chunk_task(t)),
                    }
                    for t in ordered
                ],
                indent=2,
            )
        )
        return

    if not ordered:
        click.echo("No open tasks.")
        return

    for t in ordered:
        marker = "OVERDUE " if t.is_overdue(today) else ""
        due = f" (due {t.due_date})" if t.due_date else ""
        click.echo(f"[{priority_score(t, today):8.2f}] {marker}{t.title}{due} - {t.estimated_hours:g}h, {t.priority.value}")


@main.command()
@click.option("--week", "week_str", default=None, help="Any date in the week (YYYY-MM-DD), defaults to latest")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(week_str: str | None, as_json: bool):
    """Show a stored schedule."""
    config = load_config()
    store = get_schedule_store(config)
    if week_str:
        stored = store.load(week_monday(_parse_date(week_str)))
    else:
        stored = store.latest()

    if stored is None:
        click.echo("No stored schedule. Run 'weekplan schedule' first.")
        return

    if not as_json:
        click.echo(f"Week of {stored.week_start} (v{stored.version}, generated {stored.generated_at:%Y-%m-%d %H:%M})\n")
    _show_schedule(stored, as_json, "No sessions scheduled.")


@main.command()
def watch():
    """Regenerate the schedule every week on the configured day."""
    from .weekly_job import setup_scheduler

    config = load_config()
    scheduler = setup_scheduler(config)
    click.echo(f"Regenerating weekly on {config.regenerate_day} at {config.regenerate_time}")
    click.echo("Press Ctrl+C to stop")
    try:
        scheduler.start()
    except KeyboardInterrupt:
        click.echo("\nStopped.")


if __name__ == "__main__":
    main()
