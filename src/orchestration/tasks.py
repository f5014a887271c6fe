"""Celery tasks and beat schedule for the record sync."""

import logging
from typing import Any

from celery import Celery, Task
from celery.schedules import crontab

from src.config import get_settings
from src.orchestration.celery_app import celery_app
from src.sync.exceptions import SyncInProgressError
from src.sync.factory import get_sync_job

logger = logging.getLogger(__name__)

PERIODIC_SYNC_NAME = "sync-records"


def parse_cron_expression(expression: str) -> crontab:
    """Convert a five-field cron expression into a Celery crontab.

    :param expression: Cron expression, e.g. "0 * * * *".
    :returns: The equivalent crontab schedule.
    :raises ValueError: If the expression does not have five fields or is invalid.
    """
    fields = expression.split()
    if len(fields) != 5:
        raise ValueError(f"Cron expression must have 5 fields, got {len(fields)}: {expression!r}")

    minute, hour, day_of_month, month_of_year, day_of_week = fields
    return crontab(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month_of_year=month_of_year,
        day_of_week=day_of_week,
    )


@celery_app.task(
    bind=True,
    name="src.orchestration.tasks.sync_records_task",
    max_retries=0,
)
def sync_records_task(self: Task) -> dict[str, Any]:
    """Run one scheduled sync.

    Every failure is logged and reported in the return value instead of
    raised, so one bad firing leaves the schedule untouched.

    :param self: The Celery task instance (bound).
    :returns: Dictionary with sync statistics, or the error.
    """
    logger.info("Running scheduled sync")

    try:
        result = get_sync_job().run()
    except SyncInProgressError as exc:
        logger.warning(f"Scheduled sync skipped: {exc}")
        return {"success": False, "error": str(exc)}
    except Exception as exc:
        logger.exception(f"Scheduled sync failed: {exc}")
        return {"success": False, "error": str(exc)}

    stats = result.model_dump()
    logger.info(f"Scheduled sync complete: {stats}")
    return stats


@celery_app.on_after_configure.connect
def setup_periodic_tasks(sender: Celery, **kwargs: Any) -> None:
    """Register the scheduled sync with beat."""
    schedule = get_settings().sync_schedule
    sender.add_periodic_task(
        parse_cron_expression(schedule),
        sync_records_task.s(),
        name=PERIODIC_SYNC_NAME,
    )
    logger.info(f"Scheduled sync registered: {schedule}")
