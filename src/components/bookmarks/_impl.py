"""
BookmarkService - Saved websites with display metadata.

Handles bookmark creation (URL normalization, favicon and title
derivation), partial updates, search and deletion.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from src.domain.entities import Bookmark
from src.domain.urls import favicon_url, normalize_url, title_from_url
from src.domain.validation import (
    ValidationError,
    merge_record,
    not_found,
    validate_bookmark_fields,
)
from src.rules.models import LimitsRules

from .ports import BookmarkRepoPort

logger = logging.getLogger(__name__)


def search_bookmarks(bookmarks: Iterable[Bookmark], query: str) -> list[Bookmark]:
    """Keep bookmarks whose title or URL contains the query, ignoring case."""
    needle = query.strip().lower()
    if not needle:
        return list(bookmarks)
    return [b for b in bookmarks if needle in b.title.lower() or needle in b.url.lower()]


class BookmarkService:
    """
    Bookmark service.

    sectionName is a plain string; it is never checked against the
    sections of the tab.
    """

    def __init__(self, repo: BookmarkRepoPort, limits: LimitsRules | None = None) -> None:
        self._repo = repo
        self._limits = limits or LimitsRules()

    def get_all(self) -> list[Bookmark]:
        return self._repo.get_all()

    def get_by_tab(self, tab_id: int) -> list[Bookmark]:
        """Get the bookmarks of a tab sorted by order."""
        return sorted(self._repo.list_by_tab(tab_id), key=lambda b: (b.order, b.id))

    def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        return self._repo.get_by_id(bookmark_id)

    def next_order(self, tab_id: int, section_name: str) -> int:
        """Order that places a new bookmark last in its section."""
        orders = [
            b.order for b in self._repo.list_by_tab(tab_id) if b.section_name == section_name
        ]
        return max(orders, default=0) + 1

    def create(
        self,
        tab_id: int,
        url: str,
        section_name: str,
        title: str | None = None,
        favicon: str | None = None,
        order: int | None = None,
    ) -> tuple[Bookmark | None, list[ValidationError]]:
        """
        Create a new bookmark.

        Returns:
            Tuple of (bookmark, errors). Bookmark is None if validation fails.
        """
        url = normalize_url(url)
        fields: dict[str, Any] = {
            "tab_id": tab_id,
            "url": url,
            "title": title.strip() if title and title.strip() else title_from_url(url),
            "favicon": favicon or favicon_url(url),
            "section_name": section_name,
            "order": self.next_order(tab_id, section_name) if order is None else order,
        }
        errors = validate_bookmark_fields(fields, self._limits)
        if errors:
            logger.debug("Rejected bookmark: %s", [e.code for e in errors])
            return None, errors

        bookmark = Bookmark(id=self._repo.next_id(), **fields)
        saved = self._repo.save(bookmark)
        logger.info("Created bookmark %s in tab %s", saved.id, saved.tab_id)
        return saved, []

    def update(
        self,
        bookmark_id: int,
        updates: dict[str, Any],
    ) -> tuple[Bookmark | None, list[ValidationError]]:
        """
        Merge the supplied fields into an existing bookmark.

        A new URL is normalized; the favicon is not re-derived.
        """
        bookmark = self._repo.get_by_id(bookmark_id)
        if bookmark is None:
            return None, [not_found("bookmark", bookmark_id)]

        if isinstance(updates.get("url"), str):
            updates = {**updates, "url": normalize_url(updates["url"])}

        errors = validate_bookmark_fields(updates, self._limits)
        if errors:
            return None, errors

        merged, errors = merge_record(bookmark, updates)
        if merged is None:
            return None, errors

        saved = self._repo.save(merged)
        logger.info("Updated bookmark %s: %s", bookmark_id, sorted(updates))
        return saved, []

    def delete(self, bookmark_id: int) -> tuple[bool, list[ValidationError]]:
        if not self._repo.delete(bookmark_id):
            return False, [not_found("bookmark", bookmark_id)]

        logger.info("Deleted bookmark %s", bookmark_id)
        return True, []
