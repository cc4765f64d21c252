"""
Settings component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import AppSettings


class SettingsRepoPort(Protocol):
    """Repository interface for the settings singleton."""

    def get(self) -> AppSettings | None:
        """Get current settings, or None if never stored."""
        ...

    def save(self, settings: AppSettings) -> AppSettings:
        """Save or update settings (upsert)."""
        ...
