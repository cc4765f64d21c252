"""
Settings component - Theme and auto-run preferences.
"""

from ._impl import SettingsService, get_default_settings
from .component import (
    run_get,
    run_reset,
    run_update,
)
from .models import (
    GetSettingsOutput,
    ResetSettingsOutput,
    UpdateSettingsInput,
    UpdateSettingsOutput,
)
from .ports import SettingsRepoPort

__all__ = [
    # Component entry points
    "run_get",
    "run_update",
    "run_reset",
    # Models
    "GetSettingsOutput",
    "UpdateSettingsInput",
    "UpdateSettingsOutput",
    "ResetSettingsOutput",
    # Ports
    "SettingsRepoPort",
    # Functions
    "get_default_settings",
    # Service
    "SettingsService",
]
