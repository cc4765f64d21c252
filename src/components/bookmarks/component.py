"""
Bookmarks component - Saved websites.

Shell Layer - wraps service results in operation outputs.
"""

from __future__ import annotations

from src.domain.validation import not_found

from ._impl import BookmarkService, search_bookmarks
from .models import (
    BookmarkListOutput,
    BookmarkOperationOutput,
    CreateBookmarkInput,
    DeleteBookmarkInput,
    GetBookmarkInput,
    ListBookmarksInput,
    UpdateBookmarkInput,
)


def run_create(
    input_data: CreateBookmarkInput,
    service: BookmarkService,
) -> BookmarkOperationOutput:
    """Create a new bookmark."""
    bookmark, errors = service.create(
        tab_id=input_data.tab_id,
        url=input_data.url,
        section_name=input_data.section_name,
        title=input_data.title,
        favicon=input_data.favicon,
        order=input_data.order,
    )

    return BookmarkOperationOutput(
        bookmark=bookmark,
        errors=tuple(errors),
        success=bookmark is not None,
    )


def run_update(
    input_data: UpdateBookmarkInput,
    service: BookmarkService,
) -> BookmarkOperationOutput:
    """Update an existing bookmark."""
    bookmark, errors = service.update(input_data.bookmark_id, dict(input_data.updates))

    return BookmarkOperationOutput(
        bookmark=bookmark,
        errors=tuple(errors),
        success=bookmark is not None,
    )


def run_delete(
    input_data: DeleteBookmarkInput,
    service: BookmarkService,
) -> BookmarkOperationOutput:
    """Delete a bookmark."""
    success, errors = service.delete(input_data.bookmark_id)

    return BookmarkOperationOutput(bookmark=None, errors=tuple(errors), success=success)


def run_get(
    input_data: GetBookmarkInput,
    service: BookmarkService,
) -> BookmarkOperationOutput:
    """Get a bookmark by ID."""
    bookmark = service.get_by_id(input_data.bookmark_id)

    if bookmark is None:
        return BookmarkOperationOutput(
            bookmark=None,
            errors=(not_found("bookmark", input_data.bookmark_id),),
            success=False,
        )

    return BookmarkOperationOutput(bookmark=bookmark, errors=(), success=True)


def run_list(
    input_data: ListBookmarksInput,
    service: BookmarkService,
) -> BookmarkListOutput:
    """List bookmarks, optionally by tab and filtered by a search query."""
    if input_data.tab_id is None:
        bookmarks = service.get_all()
    else:
        bookmarks = service.get_by_tab(input_data.tab_id)

    if input_data.query:
        bookmarks = search_bookmarks(bookmarks, input_data.query)

    return BookmarkListOutput(bookmarks=tuple(bookmarks), total=len(bookmarks))
