"""Busy time repository interface."""

from typing import Protocol

from weekplan.core.intervals import BusyInterval


class BusyTimeRepository(Protocol):
    """Interface for fetching committed time blocks from any backend."""

    def fetch_busy(self) -> list[tuple[int, BusyInterval]]:
        """Fetch (day_index, interval) pairs for the week."""
        ...
