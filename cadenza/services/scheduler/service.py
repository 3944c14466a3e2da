"""
Scheduler Service - Background scheduler lifecycle management
Runs the day rollover at local midnight
"""
import logging
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from cadenza.core.constants import ROLLOVER_HOUR, ROLLOVER_MINUTE
from cadenza.services.habits import HabitService
from cadenza.utils.timezone import get_app_tz

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler: Optional[BackgroundScheduler] = None


def run_rollover(habit_service: HabitService) -> None:
    """Job body: start a new day on the habit collection"""
    try:
        habit_service.start_new_day()
    except Exception as e:
        logger.error(f"[ROLLOVER] Error starting new day: {e}", exc_info=True)


def start_scheduler(habit_service: HabitService) -> BackgroundScheduler:
    """
    Start the background scheduler

    Args:
        habit_service: Collection whose daily flags are reset at midnight

    Returns:
        The running scheduler
    """
    global scheduler

    if scheduler is not None:
        logger.warning("Scheduler already running")
        return scheduler

    tz = get_app_tz()
    scheduler = BackgroundScheduler(timezone=tz)

    scheduler.add_job(
        func=run_rollover,
        args=[habit_service],
        trigger=CronTrigger(hour=ROLLOVER_HOUR, minute=ROLLOVER_MINUTE, timezone=tz),
        id='day_rollover',
        name='Reset completion flags for the new day',
        replace_existing=True
    )

    scheduler.start()
    logger.info(f"Scheduler started - day rollover at {ROLLOVER_HOUR:02d}:{ROLLOVER_MINUTE:02d} {tz.zone}")
    return scheduler


def stop_scheduler():
    """Stop the background scheduler"""
    global scheduler

    if scheduler is not None:
        scheduler.shutdown()
        scheduler = None
        logger.info("Scheduler stopped")
