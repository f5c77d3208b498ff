"""Task decomposition into bounded work units - pure, no I/O."""

from dataclasses import dataclass

from .tasks import Task

MAX_CHUNK_MINUTES = 60


@dataclass(frozen=True)
class TaskChunk:
    """One schedulable piece of a task."""

    task_id: str
    title: str
    duration: int
    chunk_index: int
    total_chunks: int

    def label(self) -> str:
        if self.total_chunks == 1:
            return self.title
        return f"{self.title} ({self.chunk_index}/{self.total_chunks})"


def total_minutes(task: Task) -> int:
    """Task effort in whole minutes."""
    return round(task.estimated_hours * 60)


def chunk_task(task: Task) -> list[TaskChunk]:
    """
    Split a task into full MAX_CHUNK_MINUTES chunks plus one remainder chunk.

    Pure function - no I/O.
    """
    minutes = total_minutes(task)
    full_chunks, remainder = divmod(minutes, MAX_CHUNK_MINUTES)
    durations = [MAX_CHUNK_MINUTES] * full_chunks
    if remainder > 0:
        durations.append(remainder)

    return [
        TaskChunk(
            task_id=task.id,
            title=task.title,
            duration=duration,
            chunk_index=i,
            total_chunks=len(durations),
        )
        for i, duration in enumerate(durations, start=1)
    ]
