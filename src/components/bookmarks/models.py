"""
Bookmarks component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import Bookmark
from src.domain.validation import ValidationError

# --- Input Models ---


@dataclass(frozen=True)
class CreateBookmarkInput:
    """
    Input for creating a bookmark.

    Title, favicon and order are derived when not given.
    """

    tab_id: int
    url: str
    section_name: str
    title: str | None = None
    favicon: str | None = None
    order: int | None = None


@dataclass(frozen=True)
class UpdateBookmarkInput:
    bookmark_id: int
    updates: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteBookmarkInput:
    bookmark_id: int


@dataclass(frozen=True)
class GetBookmarkInput:
    bookmark_id: int


@dataclass(frozen=True)
class ListBookmarksInput:
    """Input for listing bookmarks, by tab and/or a title/url search."""

    tab_id: int | None = None
    query: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class BookmarkOperationOutput:
    bookmark: Bookmark | None
    errors: tuple[ValidationError, ...]
    success: bool


@dataclass(frozen=True)
class BookmarkListOutput:
    bookmarks: tuple[Bookmark, ...]
    total: int
