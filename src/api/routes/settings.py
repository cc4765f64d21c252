"""
Settings API.

GET/PATCH for the singleton preferences record (theme, autoRun).
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.api.deps import get_settings_service
from src.api.errors import parse_body, validation_failed
from src.api.schemas import ErrorResponse, SettingsUpdateRequest
from src.components.settings import (
    SettingsService,
    UpdateSettingsInput,
    run_get,
    run_update,
)
from src.domain.entities import AppSettings

router = APIRouter()

INVALID = "Invalid settings data"


@router.get("", response_model=AppSettings, summary="Get settings")
def read_settings(service: SettingsService = Depends(get_settings_service)) -> AppSettings:
    """Return current settings, or the defaults if never changed."""
    return run_get(service).settings


@router.patch(
    "",
    response_model=AppSettings,
    summary="Update settings",
    responses={400: {"model": ErrorResponse, "description": "Validation errors"}},
)
def update_settings(
    payload: Any = Body(None),
    service: SettingsService = Depends(get_settings_service),
) -> AppSettings:
    """Merge the supplied theme/autoRun into the settings."""
    data = parse_body(SettingsUpdateRequest, payload, INVALID)

    result = run_update(UpdateSettingsInput(updates=data.model_dump(exclude_unset=True)), service)

    if not result.success:
        raise validation_failed(INVALID, result.errors)

    return result.settings
