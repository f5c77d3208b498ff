"""Busy interval storage - per-day ordered chains, no I/O."""

from dataclasses import dataclass
from typing import Iterator

from .errors import ValidationError

MINUTES_PER_DAY = 1440
DAYS_PER_WEEK = 7
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def format_minutes(minutes: int) -> str:
    """Format minutes from midnight as HH:MM (1440 renders as 24:00)."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _is_minute(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class BusyInterval:
    """A committed time range within one day, in minutes from midnight."""

    start: int
    end: int
    label: str = ""

    def __post_init__(self):
        if not _is_minute(self.start) or not _is_minute(self.end):
            raise ValidationError(
                f"Busy interval bounds must be whole minutes, got {self.start!r}-{self.end!r}"
            )
        if self.start < 0 or self.end > MINUTES_PER_DAY:
            raise ValidationError(
                f"Busy interval {self.start}-{self.end} is outside 0-{MINUTES_PER_DAY}"
            )
        if self.start >= self.end:
            raise ValidationError(f"Busy interval start {self.start} must be before end {self.end}")

    def duration_minutes(self) -> int:
        return self.end - self.start

    def format(self) -> str:
        return f"{format_minutes(self.start)}-{format_minutes(self.end)}"


def validate_day_index(day_index) -> int:
    """Return day_index if it names a weekday (0=Monday ... 6=Sunday)."""
    if not _is_minute(day_index) or not 0 <= day_index < DAYS_PER_WEEK:
        raise ValidationError(f"Day index must be 0-6, got {day_index!r}")
    return day_index


@dataclass
class _Node:
    interval: BusyInterval
    next: "_Node | None" = None


class DayIntervalList:
    """
    Singly linked chain of busy intervals ordered by start time.

    Equal starts keep insertion order. Overlaps are not merged.
    """

    def __init__(self):
        self.head: _Node | None = None
        self.size = 0

    def insert(self, interval: BusyInterval) -> None:
        node = _Node(interval)
        if self.head is None or interval.start < self.head.interval.start:
            node.next = self.head
            self.head = node
        else:
            current = self.head
            while current.next and current.next.interval.start <= interval.start:
                current = current.next
            node.next = current.next
            current.next = node
        self.size += 1

    def __iter__(self) -> Iterator[BusyInterval]:
        current = self.head
        while current:
            yield current.interval
            current = current.next

    def __len__(self) -> int:
        return self.size


class IntervalStore:
    """Seven DayIntervalLists, index 0 = Monday."""

    def __init__(self):
        self.days = [DayIntervalList() for _ in range(DAYS_PER_WEEK)]

    def insert(self, day_index: int, interval: BusyInterval) -> None:
        """Add an interval to a day's chain, keeping start-time order."""
        self.days[validate_day_index(day_index)].insert(interval)

    def day(self, day_index: int) -> DayIntervalList:
        return self.days[validate_day_index(day_index)]

    def __iter__(self) -> Iterator[DayIntervalList]:
        return iter(self.days)


def build_interval_store(busy_intervals: list[tuple[int, BusyInterval]]) -> IntervalStore:
    """
    Build the per-day chains from (day_index, interval) pairs.

    Pure function - no I/O. Fails on the first invalid entry.
    """
    store = IntervalStore()
    for entry in busy_intervals:
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            raise ValidationError(f"Expected a (day_index, interval) pair, got {entry!r}")
        day_index, interval = entry
        if not isinstance(interval, BusyInterval):
            raise ValidationError(f"Expected a BusyInterval, got {interval!r}")
        store.insert(day_index, interval)
    return store
