"""
Sections component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Section


class SectionRepoPort(Protocol):
    """Repository interface for sections."""

    def next_id(self) -> int:
        ...

    def get_all(self) -> list[Section]:
        """List all sections in insertion order."""
        ...

    def list_by_tab(self, tab_id: int) -> list[Section]:
        ...

    def get_by_id(self, section_id: int) -> Section | None:
        ...

    def save(self, section: Section) -> Section:
        """Save or update section."""
        ...

    def delete(self, section_id: int) -> bool:
        ...
