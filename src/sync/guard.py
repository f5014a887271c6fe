"""Single-flight guards that stop overlapping sync runs.

A guard is held for the whole of a sync run. Trying to enter a guard that is
already held raises SyncInProgressError immediately rather than waiting.

- LocalSingleFlightGuard serialises runs inside one process.
- RedisSingleFlightGuard serialises runs across the API and Celery workers.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from redis.exceptions import LockError

from src.sync.exceptions import SyncInProgressError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

REDIS_LOCK_NAME = "sync:in-progress"


class SingleFlightGuard(ABC):
    """Base class for guards that allow at most one sync at a time."""

    @abstractmethod
    def _try_acquire(self) -> bool:
        """Acquire the guard without blocking.

        :returns: True if the guard was acquired.
        """
        ...

    @abstractmethod
    def _release(self) -> None:
        """Release a guard acquired by _try_acquire."""
        ...

    @contextmanager
    def hold(self) -> Iterator[None]:
        """Hold the guard for the duration of the block.

        :raises SyncInProgressError: If another run holds the guard.
        """
        if not self._try_acquire():
            logger.warning("Sync requested while another run is in progress")
            raise SyncInProgressError()
        try:
            yield
        finally:
            self._release()


class LocalSingleFlightGuard(SingleFlightGuard):
    """In-process guard backed by a threading.Lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def locked(self) -> bool:
        """Whether a sync currently holds the guard."""
        return self._lock.locked()

    def _try_acquire(self) -> bool:
        return self._lock.acquire(blocking=False)

    def _release(self) -> None:
        self._lock.release()


class RedisSingleFlightGuard(SingleFlightGuard):
    """Cross-process guard backed by a Redis lock.

    The lock expires after ttl_seconds so a crashed run cannot block syncing forever.
    """

    def __init__(self, redis_client: Redis, *, ttl_seconds: int, name: str = REDIS_LOCK_NAME) -> None:
        """Initialise the guard.

        :param redis_client: Redis connection.
        :param ttl_seconds: Lock expiry in seconds.
        :param name: Redis key used for the lock.
        """
        self._lock = redis_client.lock(name, timeout=ttl_seconds)

    def _try_acquire(self) -> bool:
        return bool(self._lock.acquire(blocking=False))

    def _release(self) -> None:
        try:
            self._lock.release()
        except LockError:
            # Lock expired mid-run and may now belong to another run
            logger.warning("Sync guard lock expired before release")
