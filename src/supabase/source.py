"""Record source that pulls the latest batch of rows from Supabase."""

import logging

from pydantic import ValidationError

from src.supabase.client import SupabaseClient
from src.supabase.exceptions import SupabaseClientError
from src.supabase.models import SourceRecord

logger = logging.getLogger(__name__)

# Maximum number of records pulled per sync run
BATCH_SIZE = 100


class SupabaseRecordSource:
    """Fetches the most recent records from one Supabase table."""

    def __init__(self, client: SupabaseClient, table: str, *, batch_size: int = BATCH_SIZE) -> None:
        """Initialise the record source.

        :param client: Supabase client.
        :param table: Table to read from.
        :param batch_size: Maximum records per batch, capped at BATCH_SIZE.
        """
        self._client = client
        self._table = table
        self._batch_size = min(batch_size, BATCH_SIZE)

    @property
    def table(self) -> str:
        """Name of the source table."""
        return self._table

    def fetch_batch(self) -> list[SourceRecord]:
        """Fetch the latest batch of records, newest created_at first.

        :returns: Up to batch_size records.
        :raises SupabaseClientError: If the rows cannot be read or parsed.
        """
        rows = self._client.select_recent(
            self._table,
            order_by="created_at",
            limit=self._batch_size,
        )

        try:
            records = [SourceRecord.model_validate(row) for row in rows[: self._batch_size]]
        except ValidationError as e:
            raise SupabaseClientError(f"Invalid record in table {self._table}: {e}") from e

        logger.info(f"Fetched {len(records)} records from Supabase table: {self._table}")
        return records
