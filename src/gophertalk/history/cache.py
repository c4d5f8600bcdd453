"""Ordered, insert-once history cache.

Keys are kept sorted with ``bisect`` so export is always in key order,
independent of insertion order. A reader/writer lock lets exports run
concurrently while inserts are exclusive.
"""

from __future__ import annotations

import logging
import threading
from bisect import bisect_left
from contextlib import contextmanager
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers block new readers so a steady stream of exports cannot
    starve inserts.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class HistoryCache:
    """Insert-once mapping from original text to its translation.

    The first insert of a key wins; later inserts of the same key are
    dropped. Entries are never removed.
    """

    def __init__(self, name: str = "history"):
        self.name = name
        self._keys: list[str] = []
        self._values: dict[str, str] = {}
        self._lock = ReadWriteLock()

    def insert(self, key: str, value: str) -> bool:
        """Insert a pair unless the key is already cached.

        Returns:
            True if the pair was added, False if the key already existed
        """
        with self._lock.write():
            if key in self._values:
                logger.debug(f"[{self.name}] already cached: {key!r}")
                return False
            self._keys.insert(bisect_left(self._keys, key), key)
            self._values[key] = value
        logger.debug(f"[{self.name}] cached: {key!r} -> {value!r}")
        return True

    def get(self, key: str) -> Optional[str]:
        with self._lock.read():
            return self._values.get(key)

    def export(self) -> list[tuple[str, str]]:
        """Return all pairs ordered by key."""
        with self._lock.read():
            return [(key, self._values[key]) for key in self._keys]

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._values

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._keys)
