"""
SectionService - Colored groupings of bookmarks within a tab.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from src.domain.entities import Section
from src.domain.validation import (
    ValidationError,
    merge_record,
    not_found,
    validate_section_fields,
)
from src.rules.models import DefaultsRules, LimitsRules

from .ports import SectionRepoPort

logger = logging.getLogger(__name__)


class SectionService:
    """
    Section service.

    The owning tab is not checked: a section may point at any tab id.
    """

    def __init__(
        self,
        repo: SectionRepoPort,
        limits: LimitsRules | None = None,
        defaults: DefaultsRules | None = None,
    ) -> None:
        self._repo = repo
        self._limits = limits or LimitsRules()
        self._defaults = defaults or DefaultsRules()

    def get_all(self) -> list[Section]:
        return self._repo.get_all()

    def get_by_tab(self, tab_id: int) -> list[Section]:
        """Get the sections of a tab sorted by order."""
        return sorted(self._repo.list_by_tab(tab_id), key=lambda s: (s.order, s.id))

    def get_by_id(self, section_id: int) -> Section | None:
        return self._repo.get_by_id(section_id)

    def next_order(self, tab_id: int) -> int:
        sections = self._repo.list_by_tab(tab_id)
        return max((s.order for s in sections), default=0) + 1

    def create(
        self,
        tab_id: int,
        name: str,
        color: str | None = None,
        order: int | None = None,
    ) -> tuple[Section | None, list[ValidationError]]:
        """
        Create a new section.

        Returns:
            Tuple of (section, errors). Section is None if validation fails.
        """
        fields: dict[str, Any] = {
            "tab_id": tab_id,
            "name": name,
            "color": self._defaults.section_color if color is None else color,
            "order": self.next_order(tab_id) if order is None else order,
        }
        errors = validate_section_fields(fields, self._limits)
        if errors:
            logger.debug("Rejected section: %s", [e.code for e in errors])
            return None, errors

        section = Section(id=self._repo.next_id(), **fields)
        saved = self._repo.save(section)
        logger.info("Created section %s in tab %s", saved.id, saved.tab_id)
        return saved, []

    def update(
        self,
        section_id: int,
        updates: dict[str, Any],
    ) -> tuple[Section | None, list[ValidationError]]:
        section = self._repo.get_by_id(section_id)
        if section is None:
            return None, [not_found("section", section_id)]

        errors = validate_section_fields(updates, self._limits)
        if errors:
            return None, errors

        merged, errors = merge_record(section, updates)
        if merged is None:
            return None, errors

        saved = self._repo.save(merged)
        logger.info("Updated section %s: %s", section_id, sorted(updates))
        return saved, []

    def delete(self, section_id: int) -> tuple[bool, list[ValidationError]]:
        """
        Delete a section.

        Bookmarks that reference it by name are left in place.
        """
        if not self._repo.delete(section_id):
            return False, [not_found("section", section_id)]

        logger.info("Deleted section %s", section_id)
        return True, []
