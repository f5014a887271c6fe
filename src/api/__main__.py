"""Entry point for serving the API.

Allows running with: python -m src.api
"""

import logging

import uvicorn

from src.api.app import app
from src.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the API on the configured port."""
    port = get_settings().port
    logger.info(f"Sync bridge running on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port, log_config=None)


if __name__ == "__main__":
    main()
