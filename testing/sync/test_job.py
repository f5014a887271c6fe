"""Tests for the sync job."""

import threading
import unittest
from unittest.mock import MagicMock

from src.notion.exceptions import NotionClientError
from src.supabase.exceptions import SupabaseClientError
from src.supabase.models import SourceRecord
from src.supabase.source import SupabaseRecordSource
from src.sync.exceptions import SyncInProgressError
from src.sync.guard import LocalSingleFlightGuard
from src.sync.job import SyncJob
from src.sync.publisher import NotionPublisher


def _records(count: int) -> list[SourceRecord]:
    return [
        SourceRecord(id=i, name=f"Record {i}", status="Done", created_at="2024-01-01")
        for i in range(1, count + 1)
    ]


class TestSyncJobRun(unittest.TestCase):
    """Tests for SyncJob.run."""

    def setUp(self) -> None:
        """Set up mocked source and publisher."""
        self.source = MagicMock()
        self.publisher = MagicMock()
        self.job = SyncJob(self.source, self.publisher)

    def test_scenario_two_records_first_publish_fails(self) -> None:
        """Test the two-record scenario where publishing record 1 throws."""
        batch = [
            SourceRecord(id=1, name="A", status="Done", created_at="2024-01-01"),
            SourceRecord(id=2, name=None, status=None, created_at="2024-01-02"),
        ]
        self.source.fetch_batch.return_value = batch
        self.publisher.publish.side_effect = [RuntimeError("notion down"), {"id": "page-2"}]

        result = self.job.run()

        self.assertTrue(result.success)
        self.assertEqual(result.records_processed, 2)
        self.assertEqual(result.records_published, 1)
        self.assertEqual(result.records_failed, 1)
        self.assertEqual(result.errors, ["record 1: notion down"])

    def test_empty_batch_skips_publishing(self) -> None:
        """Test that an empty batch succeeds with zero publisher calls."""
        self.source.fetch_batch.return_value = []

        result = self.job.run()

        self.assertTrue(result.success)
        self.assertEqual(result.records_processed, 0)
        self.publisher.publish.assert_not_called()

    def test_fetch_failure_propagates_and_skips_publishing(self) -> None:
        """Test that a fetch error reaches the caller unchanged."""
        error = SupabaseClientError("connection refused")
        self.source.fetch_batch.side_effect = error

        with self.assertRaises(SupabaseClientError) as context:
            self.job.run()

        self.assertIs(context.exception, error)
        self.publisher.publish.assert_not_called()

    def test_records_processed_counts_fetched_records_regardless_of_failures(self) -> None:
        """Test records_processed equals batch length for several sizes."""
        for size in (0, 1, 37, 100):
            with self.subTest(size=size):
                self.source.fetch_batch.return_value = _records(size)
                self.publisher.publish.side_effect = RuntimeError("always fails")

                result = self.job.run()

                self.assertEqual(result.records_processed, size)
                self.assertEqual(result.records_failed, size)
                self.assertEqual(result.records_attempted, size)

    def test_failure_does_not_short_circuit_later_records(self) -> None:
        """Test that every record is published in fetch order after a failure."""
        batch = _records(5)
        self.source.fetch_batch.return_value = batch
        self.publisher.publish.side_effect = [None, RuntimeError("k fails"), None, None, None]

        result = self.job.run()

        published_ids = [c.args[0].id for c in self.publisher.publish.call_args_list]
        self.assertEqual(published_ids, [1, 2, 3, 4, 5])
        self.assertEqual(result.records_published, 4)
        self.assertEqual(result.records_failed, 1)


class TestSyncJobDirtyRows(unittest.TestCase):
    """Tests for SyncJob over rows with malformed values."""

    def setUp(self) -> None:
        """Wire a Supabase source and Notion publisher over mocked clients."""
        self.supabase = MagicMock()
        self.notion = MagicMock()
        self.notion.create_page.side_effect = self._create_page
        self.job = SyncJob(
            SupabaseRecordSource(self.supabase, "records"),
            NotionPublisher(self.notion, "db-123"),
        )

    @staticmethod
    def _create_page(database_id: str, properties: dict) -> dict:
        if not isinstance(properties["Created At"]["date"]["start"], str):
            raise NotionClientError("Notion API request failed: 400 - body.properties invalid")
        return {"id": "page"}

    def test_null_created_at_fails_only_that_record(self) -> None:
        """Test that a null created_at reaches the publisher and fails per record."""
        self.supabase.select_recent.return_value = [
            {"id": 1, "name": "A", "status": "Done", "created_at": "2024-01-01"},
            {"id": 2, "name": "B", "status": None, "created_at": None},
            {"id": 3, "name": None, "status": None, "created_at": "2024-01-03"},
        ]

        result = self.job.run()

        self.assertEqual(result.records_processed, 3)
        self.assertEqual(result.records_published, 2)
        self.assertEqual(result.records_failed, 1)
        self.assertTrue(result.errors[0].startswith("record 2:"))
        self.assertEqual(self.notion.create_page.call_count, 3)

    def test_non_string_name_is_published(self) -> None:
        """Test that a numeric name is coerced and published."""
        self.supabase.select_recent.return_value = [
            {"id": 1, "name": 42, "status": 7, "created_at": "2024-01-01"},
        ]

        result = self.job.run()

        self.assertEqual(result.records_published, 1)
        properties = self.notion.create_page.call_args.args[1]
        self.assertEqual(properties["Name"]["title"][0]["text"]["content"], "42")
        self.assertEqual(properties["Status"]["select"]["name"], "7")


class TestSyncJobGuard(unittest.TestCase):
    """Tests for SyncJob with a single-flight guard."""

    def test_overlapping_run_is_rejected(self) -> None:
        """Test that a second run while the first holds the guard raises."""
        guard = LocalSingleFlightGuard()
        started = threading.Event()
        release = threading.Event()
        outcome: dict[str, object] = {}

        slow_source = MagicMock()

        def _slow_fetch() -> list[SourceRecord]:
            started.set()
            release.wait(timeout=5)
            return []

        slow_source.fetch_batch.side_effect = _slow_fetch
        publisher = MagicMock()
        job = SyncJob(slow_source, publisher, guard=guard)

        def _first_run() -> None:
            outcome["result"] = job.run()

        thread = threading.Thread(target=_first_run)
        thread.start()
        self.assertTrue(started.wait(timeout=5))

        with self.assertRaises(SyncInProgressError):
            job.run()

        release.set()
        thread.join(timeout=5)
        self.assertEqual(outcome["result"].records_processed, 0)
        self.assertEqual(slow_source.fetch_batch.call_count, 1)

    def test_guard_released_after_fetch_failure(self) -> None:
        """Test that a failed run does not leave the guard held."""
        guard = LocalSingleFlightGuard()
        source = MagicMock()
        source.fetch_batch.side_effect = [SupabaseClientError("down"), []]
        job = SyncJob(source, MagicMock(), guard=guard)

        with self.assertRaises(SupabaseClientError):
            job.run()

        self.assertFalse(guard.locked)
        self.assertEqual(job.run().records_processed, 0)

    def test_without_guard_runs_may_overlap(self) -> None:
        """Test that with no guard a nested run is allowed."""
        source = MagicMock()
        publisher = MagicMock()
        job = SyncJob(source, publisher)
        inner_results = []

        def _fetch_and_reenter() -> list[SourceRecord]:
            if not inner_results:
                inner_results.append(None)
                inner_results[0] = job.run()
            return _records(1)

        source.fetch_batch.side_effect = _fetch_and_reenter

        result = job.run()

        self.assertEqual(result.records_processed, 1)
        self.assertEqual(inner_results[0].records_processed, 1)
        self.assertEqual(publisher.publish.call_count, 2)


if __name__ == "__main__":
    unittest.main()
