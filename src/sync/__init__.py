"""Sync job mirroring Supabase records into Notion."""

from src.sync.exceptions import SyncInProgressError
from src.sync.factory import build_sync_job, get_sync_job
from src.sync.guard import LocalSingleFlightGuard, RedisSingleFlightGuard, SingleFlightGuard
from src.sync.job import SyncJob
from src.sync.mapper import build_page_properties
from src.sync.models import SyncResult
from src.sync.publisher import NotionPublisher

__all__ = [
    "LocalSingleFlightGuard",
    "NotionPublisher",
    "RedisSingleFlightGuard",
    "SingleFlightGuard",
    "SyncInProgressError",
    "SyncJob",
    "SyncResult",
    "build_page_properties",
    "build_sync_job",
    "get_sync_job",
]
