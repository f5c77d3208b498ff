"""Schedule output records."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from .intervals import DAY_NAMES, format_minutes


def week_monday(today: date) -> date:
    """The most recent Monday on or before today."""
    return today - timedelta(days=today.weekday())


@dataclass(frozen=True)
class ScheduledChunk:
    """A task chunk placed on a concrete day and time."""

    task_id: str
    title: str
    chunk_index: int
    total_chunks: int
    start: int
    end: int
    scheduled_date: date
    day_index: int
    priority_score: float = 0.0
    notes: str = ""
    activity_id: str | None = None

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_index]

    def format_time(self) -> str:
        return f"{format_minutes(self.start)}-{format_minutes(self.end)}"

    def to_dict(self) -> dict:
        return {
            "taskId": self.task_id,
            "title": self.title,
            "chunkIndex": self.chunk_index,
            "totalChunks": self.total_chunks,
            "scheduledStart": self.start,
            "scheduledEnd": self.end,
            "scheduledDate": self.scheduled_date.isoformat(),
            "dayOfWeek": self.day_index,
            "calculatedPriority": self.priority_score,
            "notes": self.notes,
            "activityId": self.activity_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduledChunk":
        return cls(
            task_id=data["taskId"],
            title=data.get("title", ""),
            chunk_index=data["chunkIndex"],
            total_chunks=data["totalChunks"],
            start=data["scheduledStart"],
            end=data["scheduledEnd"],
            scheduled_date=date.fromisoformat(data["scheduledDate"]),
            day_index=data["dayOfWeek"],
            priority_score=data.get("calculatedPriority", 0.0),
            notes=data.get("notes") or "",
            activity_id=data.get("activityId"),
        )


@dataclass
class GeneratedSchedule:
    """A week's generated sessions plus bookkeeping for storage."""

    week_start: date
    sessions: list[ScheduledChunk] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.now)
    version: int = 1
    # Tasks that did not fully fit; set by the workflow layer, never stored.
    unscheduled: list = field(default_factory=list, compare=False, repr=False)

    def sessions_by_day(self) -> dict[date, list[ScheduledChunk]]:
        """Sessions grouped by date, each day sorted by start time."""
        by_day: dict[date, list[ScheduledChunk]] = {}
        for s in sorted(self.sessions, key=lambda s: (s.scheduled_date, s.start)):
            by_day.setdefault(s.scheduled_date, []).append(s)
        return by_day

    def scheduled_minutes(self) -> int:
        return sum(s.duration for s in self.sessions)

    def to_dict(self) -> dict:
        return {
            "weekStartDate": self.week_start.isoformat(),
            "generatedAt": self.generated_at.isoformat(),
            "version": self.version,
            "sessions": [s.to_dict() for s in self.sessions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedSchedule":
        return cls(
            week_start=date.fromisoformat(data["weekStartDate"]),
            sessions=[ScheduledChunk.from_dict(s) for s in data.get("sessions", [])],
            generated_at=datetime.fromisoformat(data["generatedAt"]),
            version=data.get("version", 1),
        )
