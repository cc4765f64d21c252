"""
Settings component - Theme and auto-run preferences.

Shell Layer - wraps service results in operation outputs.
"""

from __future__ import annotations

from ._impl import SettingsService
from .models import (
    GetSettingsOutput,
    ResetSettingsOutput,
    UpdateSettingsInput,
    UpdateSettingsOutput,
)


def run_get(service: SettingsService) -> GetSettingsOutput:
    """Get current settings (defaults if never changed)."""
    return GetSettingsOutput(settings=service.get())


def run_update(
    input_data: UpdateSettingsInput,
    service: SettingsService,
) -> UpdateSettingsOutput:
    """Merge the supplied fields into the settings record."""
    settings, errors = service.update(dict(input_data.updates))

    return UpdateSettingsOutput(
        settings=settings,
        errors=tuple(errors),
        success=not errors,
    )


def run_reset(service: SettingsService) -> ResetSettingsOutput:
    """Reset settings to defaults."""
    return ResetSettingsOutput(settings=service.reset_to_defaults())
