"""Sleep schedule to busy interval conversion - pure, no I/O."""

from .errors import ValidationError
from .intervals import DAYS_PER_WEEK, MINUTES_PER_DAY, BusyInterval

WAKE_WINDOW_MINUTES = 30


def parse_clock(value: str) -> int:
    """Parse HH:MM into minutes from midnight. "0" or "" means unset (0)."""
    text = value.strip()
    if not text or text == "0":
        return 0
    try:
        hours_text, _, minutes_text = text.partition(":")
        hours = int(hours_text)
        minutes = int(minutes_text or 0)
    except ValueError:
        raise ValidationError(f"Invalid time {value!r} (expected HH:MM)") from None
    if hours < 0 or not 0 <= minutes < 60:
        raise ValidationError(f"Invalid time {value!r} (expected HH:MM)")
    total = hours * 60 + minutes
    if total > MINUTES_PER_DAY:
        raise ValidationError(f"Time {value!r} is outside the day")
    return total


def sleep_intervals(bedtimes: list[int], wake_times: list[int]) -> list[tuple[int, BusyInterval]]:
    """
    Busy intervals for each night's sleep plus a short wake-up window.

    bedtimes and wake_times hold minutes from midnight per weekday, Monday
    first. A day is skipped when either value is 0. The bedtime block runs to
    midnight, the morning block from midnight to wake-up, then a
    WAKE_WINDOW_MINUTES window follows wake-up.
    """
    if len(bedtimes) != DAYS_PER_WEEK or len(wake_times) != DAYS_PER_WEEK:
        raise ValidationError("Sleep schedule needs exactly 7 bedtimes and 7 wake times")

    busy = []
    for day, (bedtime, wake) in enumerate(zip(bedtimes, wake_times)):
        if bedtime <= 0 or wake <= 0:
            continue
        if bedtime < MINUTES_PER_DAY:
            busy.append((day, BusyInterval(bedtime, MINUTES_PER_DAY, label="Sleep")))
        busy.append((day, BusyInterval(0, wake, label="Sleep")))
        if wake < MINUTES_PER_DAY:
            wake_end = min(wake + WAKE_WINDOW_MINUTES, MINUTES_PER_DAY)
            busy.append((day, BusyInterval(wake, wake_end, label="Wake up")))
    return busy
