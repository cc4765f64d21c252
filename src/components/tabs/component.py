"""
Tabs component - Top-level bookmark categories.

Shell Layer - wraps service results in operation outputs.
"""

from __future__ import annotations

from src.domain.validation import not_found

from ._impl import TabService
from .models import (
    CreateTabInput,
    DeleteTabInput,
    GetTabInput,
    TabListOutput,
    TabOperationOutput,
    UpdateTabInput,
)


def run_create(
    input_data: CreateTabInput,
    service: TabService,
) -> TabOperationOutput:
    """Create a new tab."""
    tab, errors = service.create(
        name=input_data.name,
        order=input_data.order,
        background_image=input_data.background_image,
        auto_switch=input_data.auto_switch,
    )

    return TabOperationOutput(tab=tab, errors=tuple(errors), success=tab is not None)


def run_update(
    input_data: UpdateTabInput,
    service: TabService,
) -> TabOperationOutput:
    """Update an existing tab."""
    tab, errors = service.update(input_data.tab_id, dict(input_data.updates))

    return TabOperationOutput(tab=tab, errors=tuple(errors), success=tab is not None)


def run_delete(
    input_data: DeleteTabInput,
    service: TabService,
) -> TabOperationOutput:
    """Delete a tab and everything in it."""
    success, errors = service.delete(input_data.tab_id)

    return TabOperationOutput(tab=None, errors=tuple(errors), success=success)


def run_get(
    input_data: GetTabInput,
    service: TabService,
) -> TabOperationOutput:
    """Get a tab by ID."""
    tab = service.get_by_id(input_data.tab_id)

    if tab is None:
        return TabOperationOutput(
            tab=None,
            errors=(not_found("tab", input_data.tab_id),),
            success=False,
        )

    return TabOperationOutput(tab=tab, errors=(), success=True)


def run_list(service: TabService) -> TabListOutput:
    """List all tabs in display order."""
    tabs = service.get_all()
    return TabListOutput(tabs=tuple(tabs), total=len(tabs))
