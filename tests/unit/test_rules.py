"""
Rules file loading and schema validation tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.rules.loader import load_rules
from src.rules.models import Rules


def write_rules(tmp_path: Path, rules: Any, name: str = "rules.yaml") -> Path:
    path = tmp_path / name
    path.write_text(yaml.dump(rules))
    return path


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_actual_rules_file(self, rules_path: Path) -> None:
        rules = load_rules(rules_path)

        assert rules.project.slug == "bookmark-tabs"
        assert rules.defaults.section_color == "#FF6B35"
        assert rules.seed.enabled is True
        assert [t.name for t in rules.seed.tabs] == [
            "Cartoons",
            "Animation",
            "Editing",
            "Color Grading",
        ]

    def test_minimal_file_uses_defaults(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"project": {"slug": "x", "rules_version": "1"}})

        rules = load_rules(path)

        assert rules.limits.name_max_length == 100
        assert rules.limits.allowed_url_schemes == ["http", "https"]
        assert rules.defaults.theme == "system"
        assert rules.seed.enabled is False
        assert rules.seed.tabs == []

    def test_yaml_fenced_in_markdown(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(
            "# Rules\n\nSome prose.\n\n```yaml\n"
            "project:\n  slug: fenced\n  rules_version: '2'\n"
            "```\n\nMore prose.\n"
        )

        assert load_rules(path).project.slug == "fenced"


class TestRulesErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("project: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, ["a", "b"])

        with pytest.raises(ValueError, match="mapping"):
            load_rules(path)

    def test_missing_project(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"limits": {"name_max_length": 10}})

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_bad_theme_default(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {"project": {"slug": "x", "rules_version": "1"}, "defaults": {"theme": "neon"}},
        )

        with pytest.raises(ValueError):
            load_rules(path)

    def test_non_positive_limit(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {"project": {"slug": "x", "rules_version": "1"}, "limits": {"url_max_length": 0}},
        )

        with pytest.raises(ValueError):
            load_rules(path)


def test_rules_model_defaults() -> None:
    rules = Rules.model_validate({"project": {"slug": "x", "rules_version": "1"}})

    assert rules.limits.color_pattern.startswith("^#")
