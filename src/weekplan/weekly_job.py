"""Weekly schedule regeneration job."""

import logging

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from .config import Config, ConfigError, load_config
from .core.errors import ValidationError
from .workflows import generate_weekly_schedule

logger = logging.getLogger(__name__)

CRON_DAYS = {
    "monday": "mon",
    "tuesday": "tue",
    "wednesday": "wed",
    "thursday": "thu",
    "friday": "fri",
    "saturday": "sat",
    "sunday": "sun",
}


def run_weekly_job(config: Config) -> None:
    """Regenerate and store this week's schedule."""
    try:
        schedule = generate_weekly_schedule(config)
    except (ValidationError, ConfigError) as e:
        logger.error(f"Weekly schedule not generated: {e}")
        return
    logger.info(
        f"Weekly schedule v{schedule.version} for {schedule.week_start}: "
        f"{len(schedule.sessions)} sessions"
    )


def setup_scheduler(config: Config | None = None) -> BlockingScheduler:
    """Set up the weekly regeneration job."""
    if config is None:
        config = load_config()

    scheduler = BlockingScheduler(timezone=config.timezone or "America/Toronto")

    day = CRON_DAYS.get(config.regenerate_day.strip().lower())
    if day is None:
        logger.warning(f"Invalid regenerate day: {config.regenerate_day}, using Monday")
        day = "mon"

    try:
        hour, minute = map(int, config.regenerate_time.split(":"))
        trigger = CronTrigger(day_of_week=day, hour=hour, minute=minute)
    except ValueError:
        logger.warning(f"Invalid regenerate time format: {config.regenerate_time}, using 06:00")
        hour, minute = 6, 0
        trigger = CronTrigger(day_of_week=day, hour=hour, minute=minute)

    scheduler.add_job(
        run_weekly_job,
        trigger,
        args=[config],
        id="weekly_schedule",
        replace_existing=True,
    )
    logger.info(f"Scheduled weekly regeneration on {day} at {hour:02d}:{minute:02d}")
    return scheduler
