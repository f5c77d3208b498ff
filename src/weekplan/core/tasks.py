"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .errors import ValidationError

UNSPECIFIED_DUE_DATE = "TBD"
NO_DUE_DATE_DAYS = 365
OVERDUE_MULTIPLIER = 100

# (hours strictly below, days at most, multiplier); first match wins.
URGENCY_RULES: list[tuple[float | None, int, int]] = [
    (3, 1, 10),
    (6, 2, 8),
    (12, 3, 6),
    (18, 4, 4),
    (None, 5, 2),
]


class PriorityClass(Enum):
    """Declared priority of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return {"low": 1, "medium": 2, "high": 3}[self.value]

    @classmethod
    def parse(cls, value) -> "PriorityClass":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Invalid priority {value!r} (expected low, medium or high)"
            ) from None


def parse_due_date(value) -> date | None:
    """Parse a YYYY-MM-DD due date; None, "" and "TBD" mean unspecified."""
    if value is None or isinstance(value, date):
        return value
    text = str(value).strip()
    if not text or text.upper() == UNSPECIFIED_DUE_DATE:
        return None
    try:
        return date.fromisoformat(text.split("T")[0])
    except ValueError:
        raise ValidationError(f"Unparseable due date {value!r}") from None


def parse_estimated_hours(value) -> float:
    """Estimated hours, defaulting to 1 when absent."""
    if value is None:
        return 1.0
    if isinstance(value, bool):
        raise ValidationError(f"Invalid estimated hours {value!r}")
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid estimated hours {value!r}") from None
    if hours < 0 or hours != hours:
        raise ValidationError(f"Estimated hours must be non-negative, got {value!r}")
    return hours


@dataclass(frozen=True)
class Task:
    """A unit of outstanding work to be scheduled."""

    id: str
    title: str
    priority: PriorityClass
    due_date: date | None
    estimated_hours: float = 1.0
    notes: str = ""
    activity_id: str | None = None
    completed: bool = False

    def __post_init__(self):
        if not self.id:
            raise ValidationError("Task is missing an id")
        if not isinstance(self.priority, PriorityClass):
            raise ValidationError(f"Task {self.id}: invalid priority {self.priority!r}")
        try:
            due = parse_due_date(self.due_date)
            hours = parse_estimated_hours(self.estimated_hours)
        except ValidationError as e:
            raise ValidationError(f"Task {self.id}: {e}") from None
        object.__setattr__(self, "due_date", due)
        object.__setattr__(self, "estimated_hours", hours)

    def days_until_due(self, as_of: date | None = None) -> int:
        """Whole days until due, floored at 0. No due date counts as a year out."""
        if not self.due_date:
            return NO_DUE_DATE_DAYS
        as_of = as_of or date.today()
        return max(0, (self.due_date - as_of).days)

    def is_overdue(self, as_of: date | None = None) -> bool:
        if not self.due_date:
            return False
        as_of = as_of or date.today()
        return self.due_date < as_of

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create a Task from a todo-item record (camelCase or snake_case keys)."""
        task_id = data.get("id")
        if task_id is None or str(task_id).strip() == "":
            raise ValidationError(f"Task is missing an id: {data.get('title', '')!r}")
        task_id = str(task_id)
        try:
            due = parse_due_date(data.get("dueDate", data.get("due_date")))
            priority = PriorityClass.parse(data.get("priority"))
            hours = parse_estimated_hours(data.get("estimatedHours", data.get("estimated_hours")))
        except ValidationError as e:
            raise ValidationError(f"Task {task_id}: {e}") from None
        return cls(
            id=task_id,
            title=data.get("title") or "",
            priority=priority,
            due_date=due,
            estimated_hours=hours,
            notes=data.get("notes") or data.get("description") or "",
            activity_id=data.get("activityId", data.get("activity_id")),
            completed=bool(data.get("completed", False)),
        )


def urgency_multiplier(estimated_hours: float, days_until_due: int) -> int:
    """Multiplier for a task that is not overdue."""
    for max_hours, max_days, multiplier in URGENCY_RULES:
        if (max_hours is None or estimated_hours < max_hours) and days_until_due <= max_days:
            return multiplier
    return 1


def priority_score(task: Task, as_of: date | None = None) -> float:
    """
    Urgency score, higher = more urgent.

    Average hours per remaining day, multiplied by 100 when overdue or by the
    first matching urgency rule otherwise.

    Pure function - no I/O.
    """
    as_of = as_of or date.today()
    days = task.days_until_due(as_of)
    base = task.estimated_hours / max(days, 1)
    if task.is_overdue(as_of):
        return base * OVERDUE_MULTIPLIER
    return base * urgency_multiplier(task.estimated_hours, days)


def schedule_order_key(task: Task, as_of: date):
    """Sort key: overdue first, then score, class, due date, id."""
    return (
        not task.is_overdue(as_of),
        -priority_score(task, as_of),
        -task.priority.rank,
        task.due_date is None,
        task.due_date or date.min,
        task.id,
    )


def sort_by_urgency(tasks: list[Task], as_of: date | None = None) -> list[Task]:
    """
    Sort tasks into scheduling order.

    Pure function - no I/O.
    """
    as_of = as_of or date.today()
    return sorted(tasks, key=lambda t: schedule_order_key(t, as_of))


def filter_open(tasks: list[Task]) -> list[Task]:
    """Drop completed tasks."""
    return [t for t in tasks if not t.completed]
