import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

# First ```yaml ... ``` block of a markdown rules document
_FENCE = re.compile(r"^\s*```yaml\s*$(.*?)^\s*```", re.MULTILINE | re.DOTALL)


def _extract_yaml(content: str) -> str:
    """Return the first fenced yaml block, or the whole text if there is none."""
    match = _FENCE.search(content)
    return match.group(1) if match else content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the organizer rules file.

    Raises FileNotFoundError if the file is missing, ValueError if the YAML
    cannot be parsed or does not match the schema.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(_extract_yaml(path.read_text()))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules file must contain a mapping, got {type(data).__name__}")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
