"""
Settings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import AppSettings
from src.domain.validation import ValidationError


@dataclass(frozen=True)
class GetSettingsOutput:
    """Output from getting settings."""

    settings: AppSettings


@dataclass(frozen=True)
class UpdateSettingsInput:
    """Input for updating settings. Only keys present are changed."""

    updates: dict[str, Any]


@dataclass(frozen=True)
class UpdateSettingsOutput:
    """Output from updating settings. On failure settings holds the unchanged record."""

    settings: AppSettings
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)
    success: bool = True


@dataclass(frozen=True)
class ResetSettingsOutput:
    """Output from resetting settings."""

    settings: AppSettings
