"""Notion API integration for publishing synced records."""

from src.notion.client import NotionClient
from src.notion.exceptions import NotionClientError

__all__ = [
    "NotionClient",
    "NotionClientError",
]
