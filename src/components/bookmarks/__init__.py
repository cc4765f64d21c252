"""
Bookmarks component - Saved websites grouped by tab and section name.
"""

from ._impl import BookmarkService, search_bookmarks
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from .models import (
    BookmarkListOutput,
    BookmarkOperationOutput,
    CreateBookmarkInput,
    DeleteBookmarkInput,
    GetBookmarkInput,
    ListBookmarksInput,
    UpdateBookmarkInput,
)
from .ports import BookmarkRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    # Input models
    "CreateBookmarkInput",
    "UpdateBookmarkInput",
    "DeleteBookmarkInput",
    "GetBookmarkInput",
    "ListBookmarksInput",
    # Output models
    "BookmarkOperationOutput",
    "BookmarkListOutput",
    # Ports
    "BookmarkRepoPort",
    # Service
    "BookmarkService",
    "search_bookmarks",
]
