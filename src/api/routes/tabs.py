"""Routes for tabs, the top-level bookmark categories."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from src.api.deps import get_tab_service
from src.api.errors import operation_failed, parse_body, parse_id
from src.api.schemas import ErrorResponse, TabCreateRequest, TabUpdateRequest
from src.components.tabs import (
    CreateTabInput,
    DeleteTabInput,
    GetTabInput,
    TabService,
    UpdateTabInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from src.domain.entities import Tab

router = APIRouter(responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})

INVALID = "Invalid tab data"
NOT_FOUND = "Tab not found"


@router.get("", response_model=list[Tab])
def list_tabs(service: TabService = Depends(get_tab_service)) -> list[Tab]:
    """List all tabs in display order."""
    return list(run_list(service).tabs)


@router.get("/{tab_id}", response_model=Tab)
def get_tab(tab_id: str, service: TabService = Depends(get_tab_service)) -> Tab:
    result = run_get(GetTabInput(tab_id=parse_id(tab_id)), service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.tab is not None
    return result.tab


@router.post("", response_model=Tab, status_code=status.HTTP_201_CREATED)
def create_tab(
    payload: Any = Body(None),
    service: TabService = Depends(get_tab_service),
) -> Tab:
    """Create a new tab. Without an order it is placed after the last tab."""
    data = parse_body(TabCreateRequest, payload, INVALID)
    input_data = CreateTabInput(
        name=data.name,
        order=data.order,
        background_image=data.background_image,
        auto_switch=data.auto_switch,
    )

    result = run_create(input_data, service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.tab is not None  # Success guarantees tab is not None
    return result.tab


@router.patch("/{tab_id}", response_model=Tab)
def update_tab(
    tab_id: str,
    payload: Any = Body(None),
    service: TabService = Depends(get_tab_service),
) -> Tab:
    """Merge the supplied fields into a tab."""
    parsed_id = parse_id(tab_id)
    data = parse_body(TabUpdateRequest, payload, INVALID)

    result = run_update(
        UpdateTabInput(tab_id=parsed_id, updates=data.model_dump(exclude_unset=True)),
        service,
    )

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.tab is not None
    return result.tab


@router.delete("/{tab_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tab(tab_id: str, service: TabService = Depends(get_tab_service)) -> Response:
    """Delete a tab together with its sections and bookmarks."""
    result = run_delete(DeleteTabInput(tab_id=parse_id(tab_id)), service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
