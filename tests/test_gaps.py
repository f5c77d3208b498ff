"""Tests for free slot derivation."""

from weekplan.core.gaps import (
    FreeSlot,
    find_free_slots,
    find_week_free_slots,
    total_free_minutes,
)
from weekplan.core.intervals import BusyInterval, DayIntervalList, build_interval_store


def make_day(*bounds: tuple[int, int]) -> DayIntervalList:
    day = DayIntervalList()
    for start, end in bounds:
        day.insert(BusyInterval(start, end))
    return day


def spans(slots: list[FreeSlot]) -> list[tuple[int, int]]:
    return [(s.start, s.end) for s in slots]


class TestFreeSlot:
    def test_duration(self):
        assert FreeSlot(start=100, end=160).duration == 60

    def test_consume_takes_from_front(self):
        slot = FreeSlot(start=0, end=100)
        assert slot.consume(30) == 0
        assert slot.start == 30
        assert slot.end == 100
        assert slot.duration == 70

    def test_fits(self):
        slot = FreeSlot(start=0, end=60)
        assert slot.fits(60)
        assert not slot.fits(61)

    def test_format(self):
        assert FreeSlot(start=540, end=630).format() == "09:00-10:30 (90 min)"


class TestFindFreeSlots:
    def test_empty_day_is_whole_day(self):
        assert spans(find_free_slots(DayIntervalList())) == [(0, 1440)]

    def test_buffer_around_single_interval(self):
        assert spans(find_free_slots(make_day((100, 200)))) == [(0, 95), (205, 1440)]

    def test_gap_between_intervals(self):
        slots = find_free_slots(make_day((540, 600), (720, 780)))
        assert spans(slots) == [(0, 535), (605, 715), (785, 1440)]

    def test_short_gap_is_dropped(self):
        # 205-205 after buffering
        slots = find_free_slots(make_day((100, 200), (210, 300)))
        assert spans(slots) == [(0, 95), (305, 1440)]

    def test_five_minute_gap_is_kept(self):
        slots = find_free_slots(make_day((100, 200), (215, 300)))
        assert (205, 210) in spans(slots)

    def test_interval_at_day_start(self):
        assert spans(find_free_slots(make_day((0, 60)))) == [(65, 1440)]

    def test_leading_gap_shorter_than_buffer(self):
        assert spans(find_free_slots(make_day((3, 60)))) == [(65, 1440)]

    def test_interval_at_day_end(self):
        assert spans(find_free_slots(make_day((1400, 1440)))) == [(0, 1395)]

    def test_fully_busy_day(self):
        assert find_free_slots(make_day((0, 1440))) == []

    def test_partially_overlapping_intervals(self):
        slots = find_free_slots(make_day((100, 300), (250, 400)))
        assert spans(slots) == [(0, 95), (405, 1440)]


class TestNestedIntervalLimitation:
    """Only neighbouring intervals are compared; nesting is not merged."""

    def test_nested_interval_exposes_time_inside_outer(self):
        slots = find_free_slots(make_day((100, 500), (200, 300)))
        # 305-500 is still inside the outer busy interval
        assert spans(slots) == [(0, 95), (305, 1440)]

    def test_nested_at_day_start(self):
        slots = find_free_slots(make_day((0, 500), (10, 20)))
        assert spans(slots) == [(25, 1440)]

    def test_free_minutes_overcounted(self):
        slots = find_free_slots(make_day((100, 500), (200, 300)))
        true_free = 95 + (1440 - 505)
        assert total_free_minutes(slots) > true_free


def test_find_week_free_slots():
    store = build_interval_store([(0, BusyInterval(100, 200)), (3, BusyInterval(0, 1440))])
    week = find_week_free_slots(store)

    assert len(week) == 7
    assert spans(week[0]) == [(0, 95), (205, 1440)]
    assert week[3] == []
    assert spans(week[6]) == [(0, 1440)]
