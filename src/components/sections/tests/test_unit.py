"""
Sections component unit tests.

Tests for section CRUD operations, color defaults and per-tab ordering.
"""

from __future__ import annotations

import pytest

from src.components.sections import (
    CreateSectionInput,
    DeleteSectionInput,
    GetSectionInput,
    ListSectionsInput,
    SectionService,
    UpdateSectionInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from src.domain.entities import Section
from src.rules.models import DefaultsRules

# --- Mock Repository ---


class MockSectionRepo:
    """In-memory section repository for testing."""

    def __init__(self) -> None:
        self._sections: dict[int, Section] = {}
        self._next = 1

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def save(self, section: Section) -> Section:
        self._sections[section.id] = section
        return section

    def get_all(self) -> list[Section]:
        return list(self._sections.values())

    def list_by_tab(self, tab_id: int) -> list[Section]:
        return [s for s in self._sections.values() if s.tab_id == tab_id]

    def get_by_id(self, section_id: int) -> Section | None:
        return self._sections.get(section_id)

    def delete(self, section_id: int) -> bool:
        return self._sections.pop(section_id, None) is not None

    def delete_by_tab(self, tab_id: int) -> int:
        ids = [s.id for s in self._sections.values() if s.tab_id == tab_id]
        for section_id in ids:
            del self._sections[section_id]
        return len(ids)


@pytest.fixture
def repo() -> MockSectionRepo:
    return MockSectionRepo()


@pytest.fixture
def service(repo: MockSectionRepo) -> SectionService:
    return SectionService(repo=repo)


# --- Creation Tests ---


class TestCreateSection:
    """Test section creation."""

    def test_create_section_success(self, service: SectionService) -> None:
        """Creates section with valid data."""
        inp = CreateSectionInput(tab_id=1, name="Featured", color="#4ECDC4", order=1)
        result = run_create(inp, service)

        assert result.success is True
        assert result.section is not None
        assert result.section.tab_id == 1
        assert result.section.name == "Featured"
        assert result.section.color == "#4ECDC4"
        assert result.section.order == 1

    def test_default_color(self, service: SectionService) -> None:
        result = run_create(CreateSectionInput(tab_id=1, name="Plain"), service)

        assert result.section is not None
        assert result.section.color == "#FF6B35"

    def test_default_color_from_rules(self, repo: MockSectionRepo) -> None:
        service = SectionService(repo=repo, defaults=DefaultsRules(section_color="#123456"))

        result = run_create(CreateSectionInput(tab_id=1, name="Plain"), service)

        assert result.section is not None
        assert result.section.color == "#123456"

    def test_order_defaults_per_tab(self, service: SectionService) -> None:
        run_create(CreateSectionInput(tab_id=1, name="A", order=4), service)
        run_create(CreateSectionInput(tab_id=2, name="B", order=9), service)

        result = run_create(CreateSectionInput(tab_id=1, name="C"), service)

        assert result.section is not None
        assert result.section.order == 5

    def test_tab_is_not_checked(self, service: SectionService) -> None:
        """A section may reference a tab id that does not exist."""
        result = run_create(CreateSectionInput(tab_id=999, name="Orphan"), service)

        assert result.success is True

    @pytest.mark.parametrize("color", ["red", "#GGGGGG", "FF6B35", "#12345"])
    def test_rejects_bad_color(self, service: SectionService, color: str) -> None:
        result = run_create(CreateSectionInput(tab_id=1, name="S", color=color), service)

        assert result.success is False
        assert result.errors[0].code == "color_invalid"
        assert result.errors[0].field == "color"

    def test_accepts_short_hex(self, service: SectionService) -> None:
        result = run_create(CreateSectionInput(tab_id=1, name="S", color="#fff"), service)

        assert result.success is True

    def test_rejects_long_name(self, service: SectionService) -> None:
        result = run_create(CreateSectionInput(tab_id=1, name="x" * 101), service)

        assert result.success is False
        assert result.errors[0].code == "name_too_long"


# --- Listing Tests ---


class TestListSections:
    def test_filter_by_tab_sorted(self, service: SectionService) -> None:
        run_create(CreateSectionInput(tab_id=1, name="Second", order=2), service)
        run_create(CreateSectionInput(tab_id=2, name="Other", order=1), service)
        run_create(CreateSectionInput(tab_id=1, name="First", order=1), service)

        result = run_list(ListSectionsInput(tab_id=1), service)

        assert [s.name for s in result.sections] == ["First", "Second"]
        assert result.total == 2

    def test_all_sections(self, service: SectionService) -> None:
        run_create(CreateSectionInput(tab_id=1, name="A"), service)
        run_create(CreateSectionInput(tab_id=2, name="B"), service)

        result = run_list(ListSectionsInput(), service)

        assert result.total == 2

    def test_unknown_tab_is_empty(self, service: SectionService) -> None:
        run_create(CreateSectionInput(tab_id=1, name="A"), service)

        assert run_list(ListSectionsInput(tab_id=42), service).sections == ()


# --- Update / Delete Tests ---


class TestUpdateSection:
    def test_update_color(self, service: SectionService) -> None:
        section = run_create(CreateSectionInput(tab_id=1, name="S"), service).section
        assert section is not None

        result = run_update(
            UpdateSectionInput(section_id=section.id, updates={"color": "#6BBA75"}), service
        )

        assert result.section is not None
        assert result.section.color == "#6BBA75"
        assert result.section.name == "S"

    def test_move_to_other_tab(self, service: SectionService) -> None:
        section = run_create(CreateSectionInput(tab_id=1, name="S"), service).section
        assert section is not None

        run_update(UpdateSectionInput(section_id=section.id, updates={"tab_id": 2}), service)

        assert [s.id for s in run_list(ListSectionsInput(tab_id=2), service).sections] == [
            section.id
        ]

    def test_update_rejects_null_tab(self, service: SectionService) -> None:
        section = run_create(CreateSectionInput(tab_id=1, name="S"), service).section
        assert section is not None

        result = run_update(
            UpdateSectionInput(section_id=section.id, updates={"tab_id": None}), service
        )

        assert result.success is False
        assert result.errors[0].field == "tabId"

    def test_update_not_found(self, service: SectionService) -> None:
        result = run_update(UpdateSectionInput(section_id=5, updates={"name": "X"}), service)

        assert result.errors[0].code == "section_not_found"


class TestDeleteSection:
    def test_delete_then_get(self, service: SectionService) -> None:
        section = run_create(CreateSectionInput(tab_id=1, name="S"), service).section
        assert section is not None

        assert run_delete(DeleteSectionInput(section_id=section.id), service).success is True

        result = run_get(GetSectionInput(section_id=section.id), service)
        assert result.success is False
        assert result.errors[0].code == "section_not_found"

    def test_delete_missing(self, service: SectionService) -> None:
        result = run_delete(DeleteSectionInput(section_id=3), service)

        assert result.success is False
