"""File-based generated schedule storage adapter."""

import json
import logging
from datetime import date
from pathlib import Path

from weekplan.core.schedule import GeneratedSchedule

logger = logging.getLogger(__name__)


class FileScheduleStore:
    """
    File-based schedule storage.

    Implements ScheduleStore protocol. Each week gets a JSON file named after
    its Monday.
    """

    def __init__(self, schedule_dir: Path | str):
        self.schedule_dir = Path(schedule_dir).expanduser()
        self.schedule_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_week(self, week_start: date) -> Path:
        return self.schedule_dir / f"{week_start.isoformat()}.json"

    def save(self, schedule: GeneratedSchedule) -> GeneratedSchedule:
        """Write the schedule, bumping the version past any stored one."""
        existing = self.load(schedule.week_start)
        if existing:
            schedule.version = existing.version + 1
        path = self._path_for_week(schedule.week_start)
        path.write_text(json.dumps(schedule.to_dict(), indent=2))
        logger.info(f"Saved schedule v{schedule.version} to {path}")
        return schedule

    def load(self, week_start: date) -> GeneratedSchedule | None:
        """Read the schedule for a week. Returns None if not found or unreadable."""
        path = self._path_for_week(week_start)
        if not path.exists():
            return None
        try:
            return GeneratedSchedule.from_dict(json.loads(path.read_text()))
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            logger.warning(f"Failed to read schedule {path}: {e}")
            return None

    def list_weeks(self) -> list[date]:
        """Week starts with a stored schedule, oldest first."""
        weeks = []
        for path in self.schedule_dir.glob("*.json"):
            try:
                weeks.append(date.fromisoformat(path.stem))
            except ValueError:
                continue
        return sorted(weeks)

    def latest(self) -> GeneratedSchedule | None:
        """Most recent stored week."""
        weeks = self.list_weeks()
        if not weeks:
            return None
        return self.load(weeks[-1])
