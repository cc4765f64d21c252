"""
Sections component - Colored groupings of bookmarks within a tab.
"""

from ._impl import SectionService
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from .models import (
    CreateSectionInput,
    DeleteSectionInput,
    GetSectionInput,
    ListSectionsInput,
    SectionListOutput,
    SectionOperationOutput,
    UpdateSectionInput,
)
from .ports import SectionRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    # Input models
    "CreateSectionInput",
    "UpdateSectionInput",
    "DeleteSectionInput",
    "GetSectionInput",
    "ListSectionsInput",
    # Output models
    "SectionOperationOutput",
    "SectionListOutput",
    # Ports
    "SectionRepoPort",
    # Service
    "SectionService",
]
