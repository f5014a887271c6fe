"""Publish source records as Notion pages."""

import logging
from typing import Any

from src.notion.client import NotionClient
from src.supabase.models import SourceRecord
from src.sync.mapper import build_page_properties

logger = logging.getLogger(__name__)


class NotionPublisher:
    """Creates one Notion page per record in a fixed database.

    No idempotency key is sent: publishing the same record twice creates two pages.
    """

    def __init__(self, client: NotionClient, database_id: str | None) -> None:
        """Initialise the publisher.

        :param client: Notion API client.
        :param database_id: Target Notion database ID.
        """
        self._client = client
        self._database_id = database_id

    def publish(self, record: SourceRecord) -> dict[str, Any]:
        """Create a page for the record.

        :param record: The record to publish.
        :returns: The created Notion page object.
        :raises NotionClientError: If the page cannot be created.
        """
        properties = build_page_properties(record)
        page = self._client.create_page(self._database_id, properties)
        logger.info(f"Synced record {record.id} to Notion")
        return page
