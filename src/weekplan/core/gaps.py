"""Free time derivation - pure, no I/O."""

from dataclasses import dataclass

from .intervals import MINUTES_PER_DAY, DayIntervalList, IntervalStore, format_minutes

BUFFER_MINUTES = 5
MIN_SLOT_MINUTES = 5


@dataclass
class FreeSlot:
    """A schedulable range within one day, consumed from the front."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    def fits(self, minutes: int) -> bool:
        return self.duration >= minutes

    def consume(self, minutes: int) -> int:
        """Take minutes off the front of the slot. Returns the old start."""
        start = self.start
        self.start += minutes
        return start

    def format(self) -> str:
        return f"{format_minutes(self.start)}-{format_minutes(self.end)} ({self.duration} min)"


def _append_gap(slots: list[FreeSlot], start: int, end: int) -> None:
    if end - start >= MIN_SLOT_MINUTES:
        slots.append(FreeSlot(start=start, end=end))


def find_free_slots(day: DayIntervalList) -> list[FreeSlot]:
    """
    Find free slots in one day around its busy intervals.

    Free time stays BUFFER_MINUTES away from every busy interval and slots
    shorter than MIN_SLOT_MINUTES are dropped. Only neighbouring intervals in
    the chain are compared, so an interval nested inside an earlier, longer one
    does not hide the free time after its own end.

    Pure function - no I/O.
    """
    intervals = list(day)
    if not intervals:
        return [FreeSlot(start=0, end=MINUTES_PER_DAY)]

    slots: list[FreeSlot] = []
    _append_gap(slots, 0, intervals[0].start - BUFFER_MINUTES)
    for prev, nxt in zip(intervals, intervals[1:]):
        _append_gap(slots, prev.end + BUFFER_MINUTES, nxt.start - BUFFER_MINUTES)
    _append_gap(slots, intervals[-1].end + BUFFER_MINUTES, MINUTES_PER_DAY)
    return slots


def find_week_free_slots(store: IntervalStore) -> list[list[FreeSlot]]:
    """Free slots for each weekday, Monday first."""
    return [find_free_slots(day) for day in store]


def total_free_minutes(slots: list[FreeSlot]) -> int:
    return sum(s.duration for s in slots)
