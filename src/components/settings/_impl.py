"""
SettingsService - Cosmetic preferences (theme, auto-run).

Provides singleton settings read/write with validation and fallback defaults.

Key behaviors:
- get always returns settings (defaults when nothing stored)
- update merges only the supplied fields and validates before persisting
"""

from __future__ import annotations

import logging
from typing import Any

from src.domain.entities import SETTINGS_ID, AppSettings
from src.domain.validation import ValidationError, merge_record
from src.rules.models import DefaultsRules

from .ports import SettingsRepoPort

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"theme", "auto_run"})


def get_default_settings(defaults: DefaultsRules | None = None) -> AppSettings:
    """Settings used before anything has been stored."""
    defaults = defaults or DefaultsRules()
    return AppSettings(id=SETTINGS_ID, theme=defaults.theme, auto_run=defaults.auto_run)


class SettingsService:
    """Settings singleton service."""

    def __init__(
        self,
        repo: SettingsRepoPort,
        defaults: DefaultsRules | None = None,
    ) -> None:
        self._repo = repo
        self._defaults = defaults or DefaultsRules()

    def get(self) -> AppSettings:
        settings = self._repo.get()
        if settings is None:
            return get_default_settings(self._defaults)
        return settings

    def update(
        self,
        updates: dict[str, Any],
    ) -> tuple[AppSettings, list[ValidationError]]:
        """
        Update settings.

        Returns:
            Tuple of (settings, validation_errors).
            If validation_errors is non-empty, settings were not saved and
            the current record is returned.
        """
        current = self.get()

        unknown = sorted(set(updates) - UPDATABLE_FIELDS)
        if unknown:
            return current, [
                ValidationError(
                    code="unknown_field",
                    message=f"Field '{key}' cannot be updated",
                    field=key,
                )
                for key in unknown
            ]

        merged, errors = merge_record(current, updates)
        if merged is None:
            return current, errors

        saved = self._repo.save(merged)
        logger.info("Updated settings: %s", sorted(updates))
        return saved, []

    def reset_to_defaults(self) -> AppSettings:
        """Reset settings to defaults and return them."""
        saved = self._repo.save(get_default_settings(self._defaults))
        logger.info("Settings reset to defaults")
        return saved
