"""Tests for task chunking."""

import pytest

from weekplan.core.chunker import TaskChunk, chunk_task, total_minutes
from weekplan.core.tasks import PriorityClass, Task


def make_task(hours: float) -> Task:
    return Task(id="t", title="Essay", priority=PriorityClass.MEDIUM, due_date=None, estimated_hours=hours)


class TestChunkTask:
    def test_two_and_a_half_hours(self):
        chunks = chunk_task(make_task(2.5))

        assert [c.duration for c in chunks] == [60, 60, 30]
        assert [c.chunk_index for c in chunks] == [1, 2, 3]
        assert all(c.total_chunks == 3 for c in chunks)
        assert sum(c.duration for c in chunks) == 150

    def test_whole_hours_have_no_remainder(self):
        assert [c.duration for c in chunk_task(make_task(3))] == [60, 60, 60]

    def test_under_an_hour(self):
        chunks = chunk_task(make_task(0.5))
        assert chunks == [TaskChunk(task_id="t", title="Essay", duration=30, chunk_index=1, total_chunks=1)]

    def test_zero_hours(self):
        assert chunk_task(make_task(0)) == []

    @pytest.mark.parametrize("hours,minutes", [(0.1, 6), (1.1, 66), (0.7, 42), (4.25, 255)])
    def test_minutes_are_whole(self, hours, minutes):
        task = make_task(hours)
        assert total_minutes(task) == minutes
        assert sum(c.duration for c in chunk_task(task)) == minutes


class TestTaskChunkLabel:
    def test_single_chunk(self):
        assert chunk_task(make_task(1))[0].label() == "Essay"

    def test_multi_chunk(self):
        assert chunk_task(make_task(2))[1].label() == "Essay (2/2)"
