"""History export.

Builds the ``{"history": [{original: translated}, ...]}`` document from
one or more caches. Each cache contributes its entries in key order and
caches appear in the order they are given.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gophertalk.history.cache import HistoryCache


@dataclass(frozen=True)
class HistorySnapshot:
    """Point-in-time ordered list of (original, translated) pairs."""

    entries: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_caches(cls, *caches: "HistoryCache") -> "HistorySnapshot":
        entries: list[tuple[str, str]] = []
        for cache in caches:
            entries.extend(cache.export())
        return cls(entries=tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "history": [
                {original: translated} for original, translated in self.entries
            ]
        }

    def to_json(self) -> str:
        """Serialize as compact JSON with no whitespace between entries."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
