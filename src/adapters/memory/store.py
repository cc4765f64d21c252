"""In-memory record store.

Process-memory only: everything is lost on restart. One instance is shared
by all repositories of an application.
"""

from __future__ import annotations

import threading
from typing import Literal

from src.domain.entities import AppSettings, Bookmark, Section, Tab

TableName = Literal["tabs", "sections", "bookmarks"]


class InMemoryStore:
    """
    Id-keyed maps plus per-table auto-increment counters.

    Repositories hold `lock` while they iterate or mutate a map, so a
    listing never races a concurrent write from another worker thread.
    Without an initial record, settings stay None until the first save.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.tabs: dict[int, Tab] = {}
        self.sections: dict[int, Section] = {}
        self.bookmarks: dict[int, Bookmark] = {}
        self.settings: AppSettings | None = settings
        self._counters: dict[TableName, int] = {"tabs": 1, "sections": 1, "bookmarks": 1}
        self.lock = threading.RLock()

    def next_id(self, table: TableName) -> int:
        """Allocate the next id for a table. Ids are never reused."""
        with self.lock:
            value = self._counters[table]
            self._counters[table] = value + 1
            return value

    def counts(self) -> dict[str, int]:
        with self.lock:
            return {
                "tabs": len(self.tabs),
                "sections": len(self.sections),
                "bookmarks": len(self.bookmarks),
            }

    def clear(self) -> None:
        """Drop all records and restart the counters - useful for testing."""
        with self.lock:
            self.tabs.clear()
            self.sections.clear()
            self.bookmarks.clear()
            self.settings = None
            self._counters = {"tabs": 1, "sections": 1, "bookmarks": 1}
