"""Task repository interface."""

from typing import Protocol

from weekplan.core.tasks import Task


class TaskRepository(Protocol):
    """Interface for fetching tasks from any backend."""

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks."""
        ...
