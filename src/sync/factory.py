"""Build the process-wide sync job from settings."""

import logging
from functools import lru_cache

from redis import Redis

from src.config import GuardMode, SyncSettings, get_settings
from src.notion.client import NotionClient
from src.supabase.client import SupabaseClient
from src.supabase.source import SupabaseRecordSource
from src.sync.guard import LocalSingleFlightGuard, RedisSingleFlightGuard, SingleFlightGuard
from src.sync.job import SyncJob
from src.sync.publisher import NotionPublisher

logger = logging.getLogger(__name__)


def build_guard(settings: SyncSettings) -> SingleFlightGuard | None:
    """Create the single-flight guard selected by SYNC_GUARD.

    :param settings: Sync settings.
    :returns: A guard, or None when overlapping runs are allowed.
    """
    match settings.sync_guard:
        case GuardMode.LOCAL:
            return LocalSingleFlightGuard()
        case GuardMode.REDIS:
            return RedisSingleFlightGuard(
                Redis.from_url(settings.redis_url),
                ttl_seconds=settings.sync_guard_ttl_seconds,
            )
        case _:
            return None


def build_sync_job(settings: SyncSettings) -> SyncJob:
    """Wire the Supabase source and Notion publisher into a sync job.

    :param settings: Sync settings.
    :returns: A ready-to-run SyncJob.
    """
    supabase_client = SupabaseClient(
        url=settings.supabase_url,
        key=settings.supabase_key,
        timeout=settings.request_timeout_seconds,
    )
    notion_client = NotionClient(
        token=settings.notion_token,
        timeout=settings.request_timeout_seconds,
    )

    logger.info(
        f"Sync job configured: table={settings.supabase_table}, guard={settings.sync_guard}"
    )
    return SyncJob(
        SupabaseRecordSource(supabase_client, settings.supabase_table),
        NotionPublisher(notion_client, settings.notion_database_id),
        guard=build_guard(settings),
    )


@lru_cache
def get_sync_job() -> SyncJob:
    """Get the cached process-wide sync job.

    :returns: The SyncJob for this process.
    """
    return build_sync_job(get_settings())
