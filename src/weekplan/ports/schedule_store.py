"""Generated schedule storage interface."""

from datetime import date
from typing import Protocol

from weekplan.core.schedule import GeneratedSchedule


class ScheduleStore(Protocol):
    """Interface for persisting generated weekly schedules."""

    def save(self, schedule: GeneratedSchedule) -> GeneratedSchedule:
        """Store a schedule, returning it with its assigned version."""
        ...

    def load(self, week_start: date) -> GeneratedSchedule | None:
        """Load the schedule for a week. Returns None if not found."""
        ...

    def latest(self) -> GeneratedSchedule | None:
        """Load the most recent stored week."""
        ...
