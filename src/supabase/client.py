"""Supabase REST (PostgREST) client for reading table rows."""

import logging
from typing import Any

import requests

from src.supabase.exceptions import SupabaseClientError

logger = logging.getLogger(__name__)

# Default timeout in seconds, matching the health probe
DEFAULT_TIMEOUT = 5.0


class SupabaseClient:
    """Read-only client for the Supabase REST API.

    Connection settings are checked when a request is made, so a client can be
    built at process start even if the environment is incomplete.
    """

    def __init__(
        self,
        *,
        url: str | None,
        key: str | None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the Supabase client.

        :param url: Supabase project URL, e.g. https://xyz.supabase.co.
        :param key: Supabase API key (anon or service role).
        :param timeout: Request timeout in seconds.
        """
        self._url = url.rstrip("/") if url else None
        self._key = key
        self._timeout = timeout

        logger.debug("SupabaseClient initialised")

    @property
    def rest_url(self) -> str:
        """Root of the PostgREST API.

        :returns: The REST root URL.
        :raises SupabaseClientError: If the project URL is not configured.
        """
        if not self._url:
            raise SupabaseClientError("Supabase URL not configured. Set SUPABASE_URL.")
        return f"{self._url}/rest/v1"

    @property
    def _headers(self) -> dict[str, str]:
        if not self._key:
            raise SupabaseClientError("Supabase key not configured. Set SUPABASE_KEY.")
        return {
            "apikey": self._key,
            "Authorization": f"Bearer {self._key}",
            "Accept": "application/json",
        }

    def _get(self, endpoint: str, params: dict[str, str]) -> Any:
        """Make a GET request to the REST API.

        :param endpoint: Path below /rest/v1.
        :param params: Query string parameters.
        :returns: Decoded JSON response.
        :raises SupabaseClientError: If the request fails.
        """
        url = f"{self.rest_url}/{endpoint}"
        headers = self._headers
        logger.debug(f"Making GET request to endpoint={endpoint}")

        try:
            response = requests.get(url, headers=headers, params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            raise SupabaseClientError(
                f"Supabase request timed out after {self._timeout}s"
            ) from e
        except requests.exceptions.HTTPError as e:
            error_body = self._extract_error_message(e.response)
            raise SupabaseClientError(
                f"Supabase request failed: {e.response.status_code} - {error_body}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise SupabaseClientError(f"Supabase request failed: {e}") from e
        except ValueError as e:
            raise SupabaseClientError(f"Supabase returned invalid JSON: {e}") from e

    def _extract_error_message(self, response: requests.Response) -> str:
        try:
            data = response.json()
            return data.get("message", response.text)
        except (ValueError, AttributeError):
            return response.text

    def select_recent(
        self,
        table: str,
        *,
        order_by: str = "created_at",
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        """Select the most recent rows from a table, newest first.

        :param table: Table name.
        :param order_by: Column to order by, descending.
        :param limit: Maximum number of rows.
        :returns: List of rows as dictionaries.
        :raises SupabaseClientError: If the request fails or the payload is not a list.
        """
        logger.info(f"Selecting up to {limit} rows from table: {table}")
        params = {
            "select": "*",
            "order": f"{order_by}.desc",
            "limit": str(limit),
        }
        rows = self._get(table, params)

        if not isinstance(rows, list):
            raise SupabaseClientError(
                f"Unexpected Supabase response for table {table}: expected a list"
            )

        return rows
