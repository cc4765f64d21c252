"""
Sections component - Colored groupings within a tab.

Shell Layer - wraps service results in operation outputs.
"""

from __future__ import annotations

from src.domain.validation import not_found

from ._impl import SectionService
from .models import (
    CreateSectionInput,
    DeleteSectionInput,
    GetSectionInput,
    ListSectionsInput,
    SectionListOutput,
    SectionOperationOutput,
    UpdateSectionInput,
)


def run_create(
    input_data: CreateSectionInput,
    service: SectionService,
) -> SectionOperationOutput:
    """Create a new section."""
    section, errors = service.create(
        tab_id=input_data.tab_id,
        name=input_data.name,
        color=input_data.color,
        order=input_data.order,
    )

    return SectionOperationOutput(
        section=section,
        errors=tuple(errors),
        success=section is not None,
    )


def run_update(
    input_data: UpdateSectionInput,
    service: SectionService,
) -> SectionOperationOutput:
    """Update an existing section."""
    section, errors = service.update(input_data.section_id, dict(input_data.updates))

    return SectionOperationOutput(
        section=section,
        errors=tuple(errors),
        success=section is not None,
    )


def run_delete(
    input_data: DeleteSectionInput,
    service: SectionService,
) -> SectionOperationOutput:
    """Delete a section."""
    success, errors = service.delete(input_data.section_id)

    return SectionOperationOutput(section=None, errors=tuple(errors), success=success)


def run_get(
    input_data: GetSectionInput,
    service: SectionService,
) -> SectionOperationOutput:
    """Get a section by ID."""
    section = service.get_by_id(input_data.section_id)

    if section is None:
        return SectionOperationOutput(
            section=None,
            errors=(not_found("section", input_data.section_id),),
            success=False,
        )

    return SectionOperationOutput(section=section, errors=(), success=True)


def run_list(
    input_data: ListSectionsInput,
    service: SectionService,
) -> SectionListOutput:
    """List sections, optionally only those of one tab."""
    if input_data.tab_id is None:
        sections = service.get_all()
    else:
        sections = service.get_by_tab(input_data.tab_id)

    return SectionListOutput(sections=tuple(sections), total=len(sections))
