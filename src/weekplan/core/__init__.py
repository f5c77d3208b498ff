"""Functional core - pure scheduling logic with no I/O."""

from .errors import ValidationError
from .intervals import BusyInterval, DayIntervalList, IntervalStore, build_interval_store
from .gaps import FreeSlot, find_free_slots, find_week_free_slots
from .tasks import PriorityClass, Task, priority_score, sort_by_urgency
from .chunker import TaskChunk, chunk_task
from .schedule import GeneratedSchedule, ScheduledChunk, week_monday
from .assigner import generate_schedule
from .sleep import sleep_intervals

__all__ = [
    "ValidationError",
    # Intervals
    "BusyInterval",
    "DayIntervalList",
    "IntervalStore",
    "build_interval_store",
    # Gaps
    "FreeSlot",
    "find_free_slots",
    "find_week_free_slots",
    # Tasks
    "PriorityClass",
    "Task",
    "priority_score",
    "sort_by_urgency",
    # Chunks
    "TaskChunk",
    "chunk_task",
    # Schedule
    "GeneratedSchedule",
    "ScheduledChunk",
    "week_monday",
    "generate_schedule",
    "sleep_intervals",
]
