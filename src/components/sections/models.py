"""
Sections component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import Section
from src.domain.validation import ValidationError

# --- Input Models ---


@dataclass(frozen=True)
class CreateSectionInput:
    """Input for creating a section. Color and order fall back to defaults."""

    tab_id: int
    name: str
    color: str | None = None
    order: int | None = None


@dataclass(frozen=True)
class UpdateSectionInput:
    section_id: int
    updates: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteSectionInput:
    section_id: int


@dataclass(frozen=True)
class GetSectionInput:
    section_id: int


@dataclass(frozen=True)
class ListSectionsInput:
    """Without tab_id every section is listed."""

    tab_id: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class SectionOperationOutput:
    section: Section | None
    errors: tuple[ValidationError, ...]
    success: bool


@dataclass(frozen=True)
class SectionListOutput:
    sections: tuple[Section, ...]
    total: int
