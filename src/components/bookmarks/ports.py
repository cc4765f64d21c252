"""
Bookmarks component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Bookmark


class BookmarkRepoPort(Protocol):
    """Repository interface for bookmarks."""

    def next_id(self) -> int:
        ...

    def get_all(self) -> list[Bookmark]:
        """List all bookmarks in insertion order."""
        ...

    def list_by_tab(self, tab_id: int) -> list[Bookmark]:
        ...

    def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        ...

    def save(self, bookmark: Bookmark) -> Bookmark:
        """Save or update bookmark."""
        ...

    def delete(self, bookmark_id: int) -> bool:
        ...
