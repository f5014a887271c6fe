"""FastAPI application configuration."""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.sync import router as sync_router
from src.config import get_settings
from src.observability.sentry import init_sentry
from src.paths import ENV_FILE
from src.utils.logging import configure_logging

load_dotenv(ENV_FILE)
configure_logging()
init_sentry()

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Supabase Notion Sync",
        version=get_settings().app_version,
    )

    # Register routers
    application.include_router(health_router)
    application.include_router(sync_router)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
