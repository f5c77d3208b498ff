"""Greedy weekly assignment of task chunks into free time - pure, no I/O."""

from datetime import date, timedelta

from .chunker import TaskChunk, chunk_task
from .gaps import FreeSlot, find_week_free_slots
from .intervals import BusyInterval, build_interval_store
from .schedule import ScheduledChunk, week_monday
from .tasks import Task, priority_score, sort_by_urgency


def build_chunk_queue(tasks: list[Task], as_of: date) -> list[tuple[Task, TaskChunk]]:
    """
    Chunks of every task in global placement order.

    Tasks are ordered by sort_by_urgency; a task's chunks stay in index order.
    """
    return [(task, chunk) for task in sort_by_urgency(tasks, as_of) for chunk in chunk_task(task)]


def place_chunk(chunk: TaskChunk, week_slots: list[list[FreeSlot]]) -> tuple[int, int] | None:
    """
    First-fit placement: days in order, then slots in order.

    Consumes the chosen slot from its front. Returns (day_index, start) or
    None when nothing in the week can hold the chunk.
    """
    for day_index, slots in enumerate(week_slots):
        for slot in slots:
            if slot.fits(chunk.duration):
                return day_index, slot.consume(chunk.duration)
    return None


def assign_chunks(
    queue: list[tuple[Task, TaskChunk]],
    week_slots: list[list[FreeSlot]],
    week_start: date,
    as_of: date,
) -> list[ScheduledChunk]:
    """Place queued chunks into the week's slots. Unplaceable chunks are dropped."""
    scheduled = []
    scores: dict[str, float] = {}
    for task, chunk in queue:
        placement = place_chunk(chunk, week_slots)
        if placement is None:
            continue
        day_index, start = placement
        if task.id not in scores:
            scores[task.id] = priority_score(task, as_of)
        scheduled.append(
            ScheduledChunk(
                task_id=chunk.task_id,
                title=chunk.title,
                chunk_index=chunk.chunk_index,
                total_chunks=chunk.total_chunks,
                start=start,
                end=start + chunk.duration,
                scheduled_date=week_start + timedelta(days=day_index),
                day_index=day_index,
                priority_score=scores[task.id],
                notes=task.notes,
                activity_id=task.activity_id,
            )
        )
    return scheduled


def generate_schedule(
    tasks: list[Task],
    busy_intervals: list[tuple[int, BusyInterval]],
    today: date | None = None,
) -> list[ScheduledChunk]:
    """
    Compute the week's task sessions around the busy intervals.

    Builds the interval store, derives free slots, scores and chunks tasks,
    then places chunks greedily. Chunks that fit nowhere are left out.

    Pure function - no I/O. Identical inputs and today give identical output.
    """
    today = today or date.today()
    store = build_interval_store(busy_intervals)
    week_slots = find_week_free_slots(store)
    queue = build_chunk_queue(tasks, today)
    return assign_chunks(queue, week_slots, week_monday(today), today)
