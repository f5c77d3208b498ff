"""Workflow layer between the CLI, the weekly job and the scheduling core.

Loads tasks and busy time through the adapters, runs the pure core, logs
what could not be placed and stores the result.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from .adapters.file_schedule import FileScheduleStore
from .adapters.json_files import JsonBusyTimeRepository, JsonTaskRepository
from .config import Config
from .core.assigner import generate_schedule
from .core.chunker import chunk_task
from .core.gaps import FreeSlot, find_week_free_slots
from .core.intervals import BusyInterval, build_interval_store
from .core.schedule import GeneratedSchedule, ScheduledChunk, week_monday
from .core.sleep import sleep_intervals
from .core.tasks import Task
from .ports import BusyTimeRepository, ScheduleStore, TaskRepository

logger = logging.getLogger(__name__)


@dataclass
class Unscheduled:
    """A task with fewer chunks placed than it needs."""

    task: Task
    scheduled_chunks: int
    total_chunks: int

    @property
    def missing_chunks(self) -> int:
        return self.total_chunks - self.scheduled_chunks


def get_task_repo(config: Config) -> TaskRepository:
    return JsonTaskRepository(config.tasks_path(), include_completed=config.include_completed)


def get_busy_repo(config: Config) -> BusyTimeRepository:
    return JsonBusyTimeRepository(config.busy_path())


def get_schedule_store(config: Config) -> ScheduleStore:
    return FileScheduleStore(config.schedule_path())


def load_tasks(config: Config) -> list[Task]:
    return get_task_repo(config).fetch_all()


def collect_busy_intervals(config: Config) -> list[tuple[int, BusyInterval]]:
    """Committed time blocks plus configured sleep blocks."""
    busy = get_busy_repo(config).fetch_busy()
    sleep = config.sleep_minutes()
    if sleep:
        bedtimes, wake_times = sleep
        sleep_blocks = sleep_intervals(bedtimes, wake_times)
        logger.debug(f"Adding {len(sleep_blocks)} sleep blocks")
        busy.extend(sleep_blocks)
    return busy


def week_free_slots(config: Config) -> list[list[FreeSlot]]:
    """Free slots per weekday for the configured busy time."""
    return find_week_free_slots(build_interval_store(collect_busy_intervals(config)))


def find_unscheduled(tasks: list[Task], sessions: list[ScheduledChunk]) -> list[Unscheduled]:
    """Tasks whose chunks were not all placed, in input order."""
    placed: dict[str, int] = {}
    for s in sessions:
        placed[s.task_id] = placed.get(s.task_id, 0) + 1

    missing = []
    for task in tasks:
        total = len(chunk_task(task))
        count = placed.get(task.id, 0)
        if count < total:
            missing.append(Unscheduled(task=task, scheduled_chunks=count, total_chunks=total))
    return missing


def build_weekly_schedule(config: Config, today: date | None = None) -> GeneratedSchedule:
    """Load inputs and run the scheduler for the week containing today."""
    today = today or date.today()
    tasks = load_tasks(config)
    busy = collect_busy_intervals(config)

    logger.info(f"Scheduling {len(tasks)} tasks around {len(busy)} busy blocks for week of {week_monday(today)}")
    sessions = generate_schedule(tasks, busy, today=today)

    unscheduled = find_unscheduled(tasks, sessions)
    for item in unscheduled:
        logger.warning(
            f"Task {item.task.id} ({item.task.title}): "
            f"{item.missing_chunks} of {item.total_chunks} chunks did not fit this week"
        )

    return GeneratedSchedule(
        week_start=week_monday(today),
        sessions=sessions,
        generated_at=datetime.now(),
        unscheduled=unscheduled,
    )


def generate_weekly_schedule(config: Config, today: date | None = None) -> GeneratedSchedule:
    """Build the week's schedule and save it to the schedule store."""
    schedule = build_weekly_schedule(config, today)
    return get_schedule_store(config).save(schedule)
