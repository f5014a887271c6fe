"""Custom exceptions for the sync job."""


class SyncInProgressError(Exception):
    """Raised when a sync is requested while another run holds the guard."""

    def __init__(self) -> None:
        super().__init__("Sync already in progress")
