"""Celery orchestration for the scheduled record sync."""

from src.orchestration.celery_app import celery_app
from src.orchestration.tasks import sync_records_task

__all__ = [
    "celery_app",
    "sync_records_task",
]
