"""Routes for bookmarks."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from src.api.deps import get_bookmark_service
from src.api.errors import operation_failed, parse_body, parse_id, parse_tab_filter
from src.api.schemas import BookmarkCreateRequest, BookmarkUpdateRequest, ErrorResponse
from src.components.bookmarks import (
    BookmarkService,
    CreateBookmarkInput,
    DeleteBookmarkInput,
    GetBookmarkInput,
    ListBookmarksInput,
    UpdateBookmarkInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from src.domain.entities import Bookmark

router = APIRouter(responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})

INVALID = "Invalid bookmark data"
NOT_FOUND = "Bookmark not found"


@router.get("", response_model=list[Bookmark])
def list_bookmarks(
    tab_id: str | None = Query(None, alias="tabId"),
    q: str | None = Query(None, description="Case-insensitive match on title or URL"),
    service: BookmarkService = Depends(get_bookmark_service),
) -> list[Bookmark]:
    """List bookmarks; with tabId only that tab's, sorted by order."""
    input_data = ListBookmarksInput(
        tab_id=parse_tab_filter(tab_id),
        query=q,
    )
    return list(run_list(input_data, service).bookmarks)


@router.get("/{bookmark_id}", response_model=Bookmark)
def get_bookmark(
    bookmark_id: str,
    service: BookmarkService = Depends(get_bookmark_service),
) -> Bookmark:
    result = run_get(GetBookmarkInput(bookmark_id=parse_id(bookmark_id)), service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.bookmark is not None
    return result.bookmark


@router.post("", response_model=Bookmark, status_code=status.HTTP_201_CREATED)
def create_bookmark(
    payload: Any = Body(None),
    service: BookmarkService = Depends(get_bookmark_service),
) -> Bookmark:
    """
    Create a bookmark.

    A URL without scheme gets https://; favicon, title and order are
    derived when omitted.
    """
    data = parse_body(BookmarkCreateRequest, payload, INVALID)
    input_data = CreateBookmarkInput(
        tab_id=data.tab_id,
        url=data.url,
        section_name=data.section_name,
        title=data.title,
        favicon=data.favicon,
        order=data.order,
    )

    result = run_create(input_data, service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.bookmark is not None
    return result.bookmark


@router.patch("/{bookmark_id}", response_model=Bookmark)
def update_bookmark(
    bookmark_id: str,
    payload: Any = Body(None),
    service: BookmarkService = Depends(get_bookmark_service),
) -> Bookmark:
    parsed_id = parse_id(bookmark_id)
    data = parse_body(BookmarkUpdateRequest, payload, INVALID)

    result = run_update(
        UpdateBookmarkInput(
            bookmark_id=parsed_id, updates=data.model_dump(exclude_unset=True)
        ),
        service,
    )

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.bookmark is not None
    return result.bookmark


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark(
    bookmark_id: str,
    service: BookmarkService = Depends(get_bookmark_service),
) -> Response:
    result = run_delete(DeleteBookmarkInput(bookmark_id=parse_id(bookmark_id)), service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
