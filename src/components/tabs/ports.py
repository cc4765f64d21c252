"""
Tabs component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Tab


class TabRepoPort(Protocol):
    """Repository interface for tabs."""

    def next_id(self) -> int:
        """Allocate a new tab id."""
        ...

    def get_all(self) -> list[Tab]:
        """List all tabs."""
        ...

    def get_by_id(self, tab_id: int) -> Tab | None:
        ...

    def save(self, tab: Tab) -> Tab:
        """Save or update tab."""
        ...

    def delete(self, tab_id: int) -> bool:
        """Delete tab. Returns False if it did not exist."""
        ...


class TabChildRepoPort(Protocol):
    """Records owned by a tab (sections, bookmarks), removed with it."""

    def delete_by_tab(self, tab_id: int) -> int:
        """Delete all records of a tab. Returns count deleted."""
        ...
