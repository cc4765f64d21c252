"""Routes for sections, the colored groupings within a tab."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from src.api.deps import get_section_service
from src.api.errors import operation_failed, parse_body, parse_id, parse_tab_filter
from src.api.schemas import ErrorResponse, SectionCreateRequest, SectionUpdateRequest
from src.components.sections import (
    CreateSectionInput,
    DeleteSectionInput,
    GetSectionInput,
    ListSectionsInput,
    SectionService,
    UpdateSectionInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from src.domain.entities import Section

router = APIRouter(responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})

INVALID = "Invalid section data"
NOT_FOUND = "Section not found"


@router.get("", response_model=list[Section])
def list_sections(
    tab_id: str | None = Query(None, alias="tabId"),
    service: SectionService = Depends(get_section_service),
) -> list[Section]:
    """List sections; with tabId only that tab's, sorted by order."""
    input_data = ListSectionsInput(tab_id=parse_tab_filter(tab_id))
    return list(run_list(input_data, service).sections)


@router.get("/{section_id}", response_model=Section)
def get_section(
    section_id: str,
    service: SectionService = Depends(get_section_service),
) -> Section:
    result = run_get(GetSectionInput(section_id=parse_id(section_id)), service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.section is not None
    return result.section


@router.post("", response_model=Section, status_code=status.HTTP_201_CREATED)
def create_section(
    payload: Any = Body(None),
    service: SectionService = Depends(get_section_service),
) -> Section:
    data = parse_body(SectionCreateRequest, payload, INVALID)
    input_data = CreateSectionInput(
        tab_id=data.tab_id,
        name=data.name,
        color=data.color,
        order=data.order,
    )

    result = run_create(input_data, service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.section is not None
    return result.section


@router.patch("/{section_id}", response_model=Section)
def update_section(
    section_id: str,
    payload: Any = Body(None),
    service: SectionService = Depends(get_section_service),
) -> Section:
    parsed_id = parse_id(section_id)
    data = parse_body(SectionUpdateRequest, payload, INVALID)

    result = run_update(
        UpdateSectionInput(section_id=parsed_id, updates=data.model_dump(exclude_unset=True)),
        service,
    )

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    assert result.section is not None
    return result.section


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_section(
    section_id: str,
    service: SectionService = Depends(get_section_service),
) -> Response:
    result = run_delete(DeleteSectionInput(section_id=parse_id(section_id)), service)

    if not result.success:
        raise operation_failed(result.errors, INVALID, NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
