"""Tests for the Supabase record source."""

import unittest
from unittest.mock import MagicMock

from src.supabase.exceptions import SupabaseClientError
from src.supabase.models import SourceRecord
from src.supabase.source import BATCH_SIZE, SupabaseRecordSource


class TestSupabaseRecordSource(unittest.TestCase):
    """Tests for SupabaseRecordSource.fetch_batch."""

    def setUp(self) -> None:
        """Set up a mocked client."""
        self.client = MagicMock()
        self.source = SupabaseRecordSource(self.client, "records")

    def test_fetch_batch_requests_latest_hundred(self) -> None:
        """Test that the batch is requested newest first, capped at 100."""
        self.client.select_recent.return_value = []

        self.source.fetch_batch()

        self.client.select_recent.assert_called_once_with(
            "records", order_by="created_at", limit=BATCH_SIZE
        )
        self.assertEqual(BATCH_SIZE, 100)

    def test_fetch_batch_preserves_order_and_parses_records(self) -> None:
        """Test that rows become SourceRecords in the order returned."""
        self.client.select_recent.return_value = [
            {"id": 2, "name": None, "status": None, "created_at": "2024-01-02"},
            {"id": 1, "name": "A", "status": "Done", "created_at": "2024-01-01", "extra": "x"},
        ]

        records = self.source.fetch_batch()

        self.assertEqual([r.id for r in records], [2, 1])
        self.assertIsInstance(records[0], SourceRecord)
        self.assertIsNone(records[0].name)
        self.assertEqual(records[1].status, "Done")

    def test_fetch_batch_truncates_oversized_response(self) -> None:
        """Test that no more than the batch size is returned."""
        self.client.select_recent.return_value = [
            {"id": i, "created_at": "2024-01-01"} for i in range(150)
        ]

        records = self.source.fetch_batch()

        self.assertEqual(len(records), BATCH_SIZE)

    def test_batch_size_cannot_exceed_maximum(self) -> None:
        """Test that a larger batch size is capped."""
        source = SupabaseRecordSource(self.client, "records", batch_size=500)
        self.client.select_recent.return_value = []

        source.fetch_batch()

        self.assertEqual(self.client.select_recent.call_args.kwargs["limit"], BATCH_SIZE)

    def test_client_error_propagates_unchanged(self) -> None:
        """Test that client failures reach the caller."""
        error = SupabaseClientError("connection refused")
        self.client.select_recent.side_effect = error

        with self.assertRaises(SupabaseClientError) as context:
            self.source.fetch_batch()

        self.assertIs(context.exception, error)

    def test_row_without_id_raises_client_error(self) -> None:
        """Test that a row missing its id fails the fetch."""
        self.client.select_recent.return_value = [{"name": "A", "created_at": "2024-01-01"}]

        with self.assertRaises(SupabaseClientError):
            self.source.fetch_batch()

    def test_row_with_null_id_raises_client_error(self) -> None:
        """Test that a null id fails the fetch."""
        self.client.select_recent.return_value = [{"id": None, "created_at": "2024-01-01"}]

        with self.assertRaises(SupabaseClientError):
            self.source.fetch_batch()

    def test_null_created_at_is_kept_verbatim(self) -> None:
        """Test that a null or missing created_at does not fail the fetch."""
        self.client.select_recent.return_value = [
            {"id": 1, "name": "A", "created_at": None},
            {"id": 2, "name": "B"},
            {"id": 3, "created_at": 1704067200},
        ]

        records = self.source.fetch_batch()

        self.assertEqual([r.created_at for r in records], [None, None, 1704067200])

    def test_non_string_labels_are_coerced(self) -> None:
        """Test that scalar name and status values become strings, empty ones None."""
        self.client.select_recent.return_value = [
            {"id": 1, "name": 42, "status": True, "created_at": "2024-01-01"},
            {"id": 2, "name": 0, "status": "", "created_at": "2024-01-02"},
        ]

        records = self.source.fetch_batch()

        self.assertEqual(records[0].name, "42")
        self.assertEqual(records[0].status, "True")
        self.assertIsNone(records[1].name)
        self.assertIsNone(records[1].status)


if __name__ == "__main__":
    unittest.main()
