"""Custom exceptions for the Notion API client."""


class NotionClientError(Exception):
    """Raised when a Notion API request fails.

    Covers HTTP errors, API-level errors returned by Notion, and missing
    configuration such as an absent token or database ID.
    """

    pass
