"""Translation history caches and export."""

from gophertalk.history.cache import HistoryCache, ReadWriteLock
from gophertalk.history.export import HistorySnapshot
from gophertalk.history.recorder import TranslationHistory

__all__ = [
    "HistoryCache",
    "ReadWriteLock",
    "HistorySnapshot",
    "TranslationHistory",
]
