"""
Field validation shared by the tab, section, bookmark and settings components.

Checks only the keys present in the mapping, so the same functions serve
create (all fields) and partial update (some fields).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import urlparse

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.rules.models import LimitsRules


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    code: str
    message: str
    field: str | None = None


def not_found(entity: str, item_id: int) -> ValidationError:
    return ValidationError(
        code=f"{entity}_not_found",
        message=f"{entity.capitalize()} with ID {item_id} not found",
    )


def is_not_found(errors: list[ValidationError] | tuple[ValidationError, ...]) -> bool:
    return any(err.code.endswith("_not_found") for err in errors)


def errors_from_pydantic(exc: PydanticValidationError) -> list[ValidationError]:
    """Map pydantic error entries to field errors keyed by their wire name."""
    errors: list[ValidationError] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"

        error_type = error.get("type", "unknown")
        if error_type == "missing":
            code = "required"
        elif "literal" in error_type or "enum" in error_type:
            code = "invalid_value"
        else:
            code = "invalid_type"

        errors.append(
            ValidationError(
                code=code,
                message=f"Field '{field}': {error.get('msg', 'Invalid value')}",
                field=field,
            )
        )
    return errors


RecordT = TypeVar("RecordT", bound=BaseModel)


def merge_record(
    record: RecordT, updates: Mapping[str, Any]
) -> tuple[RecordT | None, list[ValidationError]]:
    """
    Merge updates over a stored record and re-validate the result.

    The id is never overwritten. Returns (merged, []) or (None, errors).
    """
    data = record.model_dump()
    data.update({k: v for k, v in updates.items() if k != "id"})
    try:
        return type(record).model_validate(data), []
    except PydanticValidationError as e:
        return None, errors_from_pydantic(e)


# --- Field checks ---


def _check_text(
    fields: Mapping[str, Any],
    key: str,
    max_length: int,
    errors: list[ValidationError],
) -> None:
    if key not in fields:
        return
    value = fields[key]
    if value is None or not str(value).strip():
        errors.append(
            ValidationError(code=f"{key}_required", message=f"{key} is required", field=key)
        )
    elif len(value) > max_length:
        errors.append(
            ValidationError(
                code=f"{key}_too_long",
                message=f"{key} must be {max_length} characters or less",
                field=key,
            )
        )


def _check_required(
    fields: Mapping[str, Any], key: str, wire_name: str, errors: list[ValidationError]
) -> None:
    """An explicit null for a non-nullable field."""
    if key in fields and fields[key] is None:
        errors.append(
            ValidationError(
                code=f"{key}_required", message=f"{wire_name} is required", field=wire_name
            )
        )


def _check_order(fields: Mapping[str, Any], errors: list[ValidationError]) -> None:
    _check_required(fields, "order", "order", errors)
    order = fields.get("order")
    if order is not None and order < 0:
        errors.append(
            ValidationError(
                code="order_negative", message="order must be zero or greater", field="order"
            )
        )


def validate_tab_fields(
    fields: Mapping[str, Any], limits: LimitsRules
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    _check_text(fields, "name", limits.name_max_length, errors)
    _check_order(fields, errors)
    image = fields.get("background_image")
    if image and len(image) > limits.url_max_length:
        errors.append(
            ValidationError(
                code="background_image_too_long",
                message=f"backgroundImage must be {limits.url_max_length} characters or less",
                field="backgroundImage",
            )
        )
    return errors


def validate_section_fields(
    fields: Mapping[str, Any], limits: LimitsRules
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    _check_required(fields, "tab_id", "tabId", errors)
    _check_text(fields, "name", limits.name_max_length, errors)
    _check_order(fields, errors)
    if "color" in fields and not re.fullmatch(limits.color_pattern, fields["color"] or ""):
        errors.append(
            ValidationError(
                code="color_invalid",
                message="color must be a hex color such as #FF6B35",
                field="color",
            )
        )
    return errors


def validate_bookmark_fields(
    fields: Mapping[str, Any], limits: LimitsRules
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    _check_required(fields, "tab_id", "tabId", errors)
    _check_text(fields, "title", limits.title_max_length, errors)
    _check_order(fields, errors)

    if "section_name" in fields:
        value = fields["section_name"]
        if value is None or not str(value).strip():
            errors.append(
                ValidationError(
                    code="section_name_required",
                    message="sectionName is required",
                    field="sectionName",
                )
            )

    if "url" in fields:
        url = fields["url"] or ""
        malformed = False
        try:
            parsed = urlparse(url)
            scheme, hostname = parsed.scheme, parsed.hostname
            parsed.port  # raises on a non-numeric or out-of-range port
        except ValueError:
            scheme, hostname, malformed = "", None, True
        if not url:
            errors.append(
                ValidationError(code="url_required", message="URL is required", field="url")
            )
        elif len(url) > limits.url_max_length:
            errors.append(
                ValidationError(
                    code="url_too_long",
                    message=f"URL must be {limits.url_max_length} characters or less",
                    field="url",
                )
            )
        elif malformed:
            errors.append(
                ValidationError(code="url_invalid", message="URL is malformed", field="url")
            )
        elif scheme not in limits.allowed_url_schemes or not hostname:
            schemes = " or ".join(f"{s}://" for s in limits.allowed_url_schemes)
            errors.append(
                ValidationError(
                    code="url_invalid_scheme",
                    message=f"URL must start with {schemes}",
                    field="url",
                )
            )
    return errors
