"""Notion API client for creating pages in a database."""

import logging
from typing import Any

import requests

from src.notion.exceptions import NotionClientError

logger = logging.getLogger(__name__)

# Default Notion API timeout in seconds
REQUEST_TIMEOUT = 5.0

# Notion API version that accepts database_id page parents
NOTION_VERSION = "2022-06-28"


class NotionClient:
    """Client for the Notion pages API.

    The token is checked when a request is made, so a missing token surfaces
    as a failed publish rather than a startup error.
    """

    BASE_URL = "https://api.notion.com/v1"

    def __init__(self, *, token: str | None, timeout: float = REQUEST_TIMEOUT) -> None:
        """Initialise the Notion client.

        :param token: Notion integration token.
        :param timeout: Request timeout in seconds.
        """
        self._token = token
        self._timeout = timeout

        logger.debug("NotionClient initialised")

    @property
    def _headers(self) -> dict[str, str]:
        """Headers for Notion API requests.

        :returns: Dictionary of required headers.
        :raises NotionClientError: If no token is configured.
        """
        if not self._token:
            raise NotionClientError("Notion integration token not configured. Set NOTION_TOKEN.")
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        }

    def _post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Make a POST request to the Notion API.

        :param endpoint: API endpoint path (without base URL).
        :param payload: Request body as dictionary.
        :returns: JSON response as dictionary.
        :raises NotionClientError: If the request fails.
        """
        url = f"{self.BASE_URL}/{endpoint}"
        headers = self._headers
        logger.debug(f"Making POST request to endpoint={endpoint}")

        try:
            response = requests.post(
                url,
                headers=headers,
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            raise NotionClientError(f"Notion API request timed out after {self._timeout}s") from e
        except requests.exceptions.HTTPError as e:
            error_body = self._extract_error_message(e.response)
            raise NotionClientError(
                f"Notion API request failed: {e.response.status_code} - {error_body}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise NotionClientError(f"Notion API request failed: {e}") from e

    def _extract_error_message(self, response: requests.Response) -> str:
        """Extract error message from Notion API error response.

        :param response: Response object from failed request.
        :returns: Error message string.
        """
        try:
            data = response.json()
            return data.get("message", response.text)
        except (ValueError, AttributeError):
            return response.text

    def create_page(
        self,
        database_id: str | None,
        properties: dict[str, Any],
    ) -> dict[str, Any]:
        """Create a new page in a database.

        :param database_id: Parent database ID.
        :param properties: Page properties to set.
        :returns: Created page object.
        :raises NotionClientError: If the database ID is missing or the request fails.
        """
        if not database_id:
            raise NotionClientError("Notion database ID not configured. Set NOTION_DATABASE_ID.")

        logger.debug(f"Creating page in database: {database_id}")
        payload = {
            "parent": {"database_id": database_id},
            "properties": properties,
        }
        return self._post("pages", payload)
