"""
Tabs component - Top-level bookmark categories.
"""

from ._impl import TabService
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from .models import (
    CreateTabInput,
    DeleteTabInput,
    GetTabInput,
    TabListOutput,
    TabOperationOutput,
    UpdateTabInput,
)
from .ports import TabChildRepoPort, TabRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    # Input models
    "CreateTabInput",
    "UpdateTabInput",
    "DeleteTabInput",
    "GetTabInput",
    # Output models
    "TabOperationOutput",
    "TabListOutput",
    # Ports
    "TabRepoPort",
    "TabChildRepoPort",
    # Service
    "TabService",
]
