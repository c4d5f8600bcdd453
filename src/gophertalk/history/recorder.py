"""Process-wide translation history.

Owns the word and sentence caches and the worker pool that fills them.
Inserts are fire-and-forget: callers submit and return immediately.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Optional

from gophertalk.history.cache import HistoryCache
from gophertalk.history.export import HistorySnapshot

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


class TranslationHistory:
    """Word and sentence caches plus background insert dispatch."""

    _instance: "TranslationHistory | None" = None
    _instance_lock = threading.Lock()

    def __init__(self, workers: int = DEFAULT_WORKERS):
        self.words = HistoryCache("words")
        self.sentences = HistoryCache("sentences")
        self._executor = ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="gophertalk-history"
        )
        self._pending: set[Future] = set()
        self._pending_lock = threading.Lock()
        self._closed = False

    @classmethod
    def get_instance(cls) -> "TranslationHistory":
        """Get or create the singleton instance."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton (for testing)."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = None

    def record_word(self, original: str, translated: str) -> None:
        """Schedule a word cache insert without waiting for it."""
        self._dispatch(self.words, original, translated)

    def record_sentence(self, original: str, translated: str) -> None:
        """Schedule a sentence cache insert without waiting for it."""
        self._dispatch(self.sentences, original, translated)

    def _dispatch(self, cache: HistoryCache, original: str, translated: str) -> None:
        try:
            future = self._executor.submit(cache.insert, original, translated)
        except RuntimeError:
            logger.warning(f"History closed, dropping {cache.name} entry: {original!r}")
            return

        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._on_done)

    def _on_done(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(f"Background history insert failed: {exc!r}")

    def drain(self, timeout: Optional[float] = None) -> None:
        """Block until every insert submitted so far has finished."""
        with self._pending_lock:
            pending = list(self._pending)
        if pending:
            wait(pending, timeout=timeout)

    def close(self) -> None:
        """Finish pending inserts and stop the worker pool."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=True)
        logger.debug(
            f"History closed ({len(self.words)} words, "
            f"{len(self.sentences)} sentences)"
        )

    def snapshot(self) -> HistorySnapshot:
        """Combined snapshot: word entries first, then sentence entries."""
        return HistorySnapshot.from_caches(self.words, self.sentences)
