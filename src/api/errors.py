"""
HTTP error mapping.

Every error body is {"message": ...}; validation failures add "errors",
a list of {code, message, field}.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.validation import ValidationError, errors_from_pydantic, is_not_found

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def error_items(errors: Iterable[ValidationError]) -> list[dict[str, Any]]:
    return [{"code": err.code, "message": err.message, "field": err.field} for err in errors]


def validation_failed(message: str, errors: Iterable[ValidationError]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": message, "errors": error_items(errors)},
    )


def operation_failed(
    errors: tuple[ValidationError, ...],
    invalid_message: str,
    not_found_message: str,
) -> HTTPException:
    """404 when the record is missing, 400 with field errors otherwise."""
    if is_not_found(errors):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found_message)
    return validation_failed(invalid_message, errors)


def parse_id(raw: str, message: str = "Invalid ID format") -> int:
    """Parse a numeric id from a path or query string."""
    value = raw.strip()
    if not value.isdecimal():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return int(value)


def parse_tab_filter(raw: str | None) -> int | None:
    """Optional tabId query filter; absent or blank means no filter."""
    if raw is None or not raw.strip():
        return None
    return parse_id(raw, "Invalid tabId format")


def parse_body(model: type[ModelT], payload: Any, message: str) -> ModelT:
    """Validate a JSON body against a request model, 400 on failure."""
    if not isinstance(payload, dict):
        raise validation_failed(
            message,
            [ValidationError(code="invalid_type", message="Body must be a JSON object")],
        )
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise validation_failed(message, errors_from_pydantic(e)) from e


# --- Handlers ---


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    content = exc.detail if isinstance(exc.detail, dict) else {"message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for error in exc.errors():
        # Skip the 'body' / 'query' prefix
        field = ".".join(str(loc) for loc in error["loc"][1:]) or None
        errors.append(
            {"code": f"validation.{error['type']}", "message": error["msg"], "field": field}
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
