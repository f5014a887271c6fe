"""Configuration for the sync bridge using pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import ENV_FILE


class GuardMode(StrEnum):
    """How concurrent sync runs are serialised."""

    NONE = "none"
    LOCAL = "local"
    REDIS = "redis"


class SyncSettings(BaseSettings):
    """Settings for the Supabase to Notion sync bridge.

    Credentials are optional here. A missing credential surfaces as a failed
    fetch or publish when the sync runs, not when the settings load.

    :param supabase_url: Supabase project URL.
    :param supabase_key: Supabase API key.
    :param supabase_table: Table to read records from.
    :param notion_token: Notion integration token.
    :param notion_database_id: Notion database that receives the pages.
    :param app_url: URL of this service's health endpoint, used by the probe.
    :param netlify_site_url: URL of the static site, used by the probe.
    :param port: Port the API listens on.
    :param app_version: Version reported by the health endpoint.
    :param request_timeout_seconds: Timeout for every outbound API call.
    :param sync_schedule: Cron expression for the scheduled sync.
    :param sync_guard: Single-flight guard mode.
    :param sync_guard_ttl_seconds: Expiry for the Redis guard lock.
    :param redis_url: Redis URL for Celery and the Redis guard.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    supabase_url: str | None = Field(default=None, description="Supabase project URL")
    supabase_key: str | None = Field(default=None, description="Supabase API key")
    supabase_table: str = Field(default="records", description="Source table name")
    notion_token: str | None = Field(default=None, description="Notion integration token")
    notion_database_id: str | None = Field(default=None, description="Target Notion database")
    app_url: str = Field(
        default="http://localhost:3000/health",
        description="Health endpoint of this service",
    )
    netlify_site_url: str | None = Field(default=None, description="Static site URL")
    port: int = Field(default=3000, ge=1, le=65535, description="API listening port")
    app_version: str = Field(default="1.0.0", description="Reported application version")
    request_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        le=120,
        description="Timeout in seconds for Supabase and Notion calls",
    )
    sync_schedule: str = Field(
        default="0 * * * *",
        description="Cron expression for the scheduled sync",
    )
    sync_guard: GuardMode = Field(
        default=GuardMode.NONE,
        description="Single-flight guard mode (none, local or redis)",
    )
    sync_guard_ttl_seconds: int = Field(
        default=3600,
        ge=1,
        description="Expiry in seconds for the Redis guard lock",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis URL for Celery and the Redis guard",
    )


@lru_cache
def get_settings() -> SyncSettings:
    """Get cached sync settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured SyncSettings instance.
    """
    return SyncSettings()
