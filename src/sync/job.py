"""Sync job that mirrors the latest Supabase records into Notion."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any, Protocol

from src.sync.models import SyncResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from src.supabase.models import SourceRecord
    from src.sync.guard import SingleFlightGuard

logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    """Anything that can fetch a batch of source records."""

    def fetch_batch(self) -> Sequence[SourceRecord]: ...


class RecordPublisher(Protocol):
    """Anything that can publish one record to the external service."""

    def publish(self, record: SourceRecord) -> Any: ...


class SyncJob:
    """Fetches a batch of records and publishes each one.

    A failure while fetching fails the run. A failure while publishing one
    record is logged and counted, and the run continues with the next record.
    Runs never retry.
    """

    def __init__(
        self,
        source: RecordSource,
        publisher: RecordPublisher,
        *,
        guard: SingleFlightGuard | None = None,
    ) -> None:
        """Initialise the sync job.

        :param source: Where records are read from.
        :param publisher: Where records are published to.
        :param guard: Optional single-flight guard. Without one, overlapping
            runs are allowed and will publish duplicate pages.
        """
        self._source = source
        self._publisher = publisher
        self._guard = guard

    def run(self) -> SyncResult:
        """Run one sync.

        :returns: Counts for the run.
        :raises SyncInProgressError: If a guard is configured and already held.
        :raises Exception: Whatever the source raises when the fetch fails.
        """
        with self._guard.hold() if self._guard is not None else nullcontext():
            return self._run()

    def _run(self) -> SyncResult:
        logger.info("Starting data synchronisation")

        try:
            records = self._source.fetch_batch()
        except Exception as e:
            logger.error(f"Sync aborted, could not fetch records: {e}")
            raise

        result = SyncResult(records_processed=len(records))

        for record in records:
            self._publish_one(record, result)

        logger.info(
            f"Data synchronisation complete: {result.records_processed} fetched, "
            f"{result.records_published} published, {result.records_failed} failed"
        )
        return result

    def _publish_one(self, record: SourceRecord, result: SyncResult) -> None:
        """Publish a single record, recording the outcome on the result.

        :param record: The record to publish.
        :param result: The SyncResult to update.
        """
        try:
            self._publisher.publish(record)
        except Exception as e:
            logger.exception(f"Failed to sync record {record.id}: {e}")
            result.records_failed += 1
            result.errors.append(f"record {record.id}: {e}")
        else:
            result.records_published += 1
