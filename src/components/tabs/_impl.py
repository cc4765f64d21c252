"""
TabService - Top-level bookmark categories.

Handles tab creation, partial updates, ordering and cascade deletion.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from src.domain.entities import Tab
from src.domain.validation import (
    ValidationError,
    merge_record,
    not_found,
    validate_tab_fields,
)
from src.rules.models import LimitsRules

from .ports import TabChildRepoPort, TabRepoPort

logger = logging.getLogger(__name__)


class TabService:
    """
    Tab service.

    Deleting a tab also deletes the sections and bookmarks that belong to it.
    """

    def __init__(
        self,
        repo: TabRepoPort,
        section_repo: TabChildRepoPort,
        bookmark_repo: TabChildRepoPort,
        limits: LimitsRules | None = None,
    ) -> None:
        self._repo = repo
        self._section_repo = section_repo
        self._bookmark_repo = bookmark_repo
        self._limits = limits or LimitsRules()

    def get_all(self) -> list[Tab]:
        """Get all tabs sorted by order."""
        return sorted(self._repo.get_all(), key=lambda t: (t.order, t.id))

    def get_by_id(self, tab_id: int) -> Tab | None:
        return self._repo.get_by_id(tab_id)

    def next_order(self) -> int:
        """Order that places a new tab after the last one."""
        tabs = self._repo.get_all()
        return max((t.order for t in tabs), default=0) + 1

    def create(
        self,
        name: str,
        order: int | None = None,
        background_image: str | None = None,
        auto_switch: bool | None = False,
    ) -> tuple[Tab | None, list[ValidationError]]:
        """
        Create a new tab.

        Returns:
            Tuple of (tab, errors). Tab is None if validation fails.
        """
        fields: dict[str, Any] = {
            "name": name,
            "order": self.next_order() if order is None else order,
            "background_image": background_image,
            "auto_switch": auto_switch,
        }
        errors = validate_tab_fields(fields, self._limits)
        if errors:
            logger.debug("Rejected tab: %s", [e.code for e in errors])
            return None, errors

        tab = Tab(id=self._repo.next_id(), **fields)
        saved = self._repo.save(tab)
        logger.info("Created tab %s (%r)", saved.id, saved.name)
        return saved, []

    def update(
        self,
        tab_id: int,
        updates: dict[str, Any],
    ) -> tuple[Tab | None, list[ValidationError]]:
        """
        Merge the supplied fields into an existing tab.

        Returns:
            Tuple of (tab, errors). Tab is None if not found or validation fails.
        """
        tab = self._repo.get_by_id(tab_id)
        if tab is None:
            return None, [not_found("tab", tab_id)]

        errors = validate_tab_fields(updates, self._limits)
        if errors:
            return None, errors

        merged, errors = merge_record(tab, updates)
        if merged is None:
            return None, errors

        saved = self._repo.save(merged)
        logger.info("Updated tab %s: %s", tab_id, sorted(updates))
        return saved, []

    def delete(self, tab_id: int) -> tuple[bool, list[ValidationError]]:
        """
        Delete a tab with its bookmarks and sections.

        Returns:
            Tuple of (success, errors).
        """
        if self._repo.get_by_id(tab_id) is None:
            return False, [not_found("tab", tab_id)]

        removed_bookmarks = self._bookmark_repo.delete_by_tab(tab_id)
        removed_sections = self._section_repo.delete_by_tab(tab_id)
        self._repo.delete(tab_id)
        logger.info(
            "Deleted tab %s with %d sections and %d bookmarks",
            tab_id,
            removed_sections,
            removed_bookmarks,
        )
        return True, []
