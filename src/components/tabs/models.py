"""
Tabs component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import Tab
from src.domain.validation import ValidationError

# --- Input Models ---


@dataclass(frozen=True)
class CreateTabInput:
    """Input for creating a tab. A missing order goes after the last tab."""

    name: str
    order: int | None = None
    background_image: str | None = None
    auto_switch: bool | None = False


@dataclass(frozen=True)
class UpdateTabInput:
    """Input for updating a tab. Only keys present in updates are changed."""

    tab_id: int
    updates: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteTabInput:
    tab_id: int


@dataclass(frozen=True)
class GetTabInput:
    tab_id: int


# --- Output Models ---


@dataclass(frozen=True)
class TabOperationOutput:
    """Output from tab operation."""

    tab: Tab | None
    errors: tuple[ValidationError, ...]
    success: bool


@dataclass(frozen=True)
class TabListOutput:
    """Output from list operation."""

    tabs: tuple[Tab, ...]
    total: int
