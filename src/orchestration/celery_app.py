"""Celery application configuration."""

from celery import Celery
from dotenv import load_dotenv

from src.config import get_settings
from src.observability.sentry import init_sentry
from src.paths import ENV_FILE
from src.utils.logging import configure_logging

load_dotenv(ENV_FILE)
configure_logging()
init_sentry()

# Redis URL for broker and result backend
REDIS_URL = get_settings().redis_url

celery_app = Celery(
    "notion_sync",
    broker=REDIS_URL,
    backend=REDIS_URL,
    include=["src.orchestration.tasks"],
)

celery_app.conf.update(
    # Task execution settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_default_queue="notion_sync",
    task_default_routing_key="notion_sync",
    # A sync that dies with its worker is not redelivered
    task_acks_late=False,
    # Result expiration (24 hours)
    result_expires=86400,
    # Worker settings
    worker_prefetch_multiplier=1,
    worker_concurrency=2,
    # Worker logging
    worker_hijack_root_logger=False,
    worker_redirect_stdouts=False,
)
