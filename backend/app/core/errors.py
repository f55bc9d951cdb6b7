"""Translation of request-validation failures into 400 problem bodies."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common import ValidationProblem

LOGGER = logging.getLogger(__name__)

BODY_KEY = "$"
_REQUIRED_TYPES = {"missing", "value_error"}


def _field_key(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc if part != "body"]
    if not parts or parts[0].isdigit():
        return BODY_KEY
    return parts[0][:1].upper() + parts[0][1:]


def _message(field: str, error: Mapping[str, Any]) -> str:
    etype = error.get("type", "")
    if field == BODY_KEY:
        if etype == "json_invalid":
            return "The request body is not valid JSON."
        if etype == "missing":
            return "A non-empty request body is required."
        return "The request body must be a JSON object."
    if etype in _REQUIRED_TYPES or (etype == "string_type" and error.get("input") is None):
        return f"The {field} field is required."
    if etype == "string_too_long":
        max_length = (error.get("ctx") or {}).get("max_length")
        return f"The field {field} must be a string with a maximum length of '{max_length}'."
    if etype == "string_type":
        return f"The field {field} must be a string."
    return f"The field {field} is invalid: {error.get('msg', etype)}."


def collect_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Group validation errors by capitalised field name, `$` for body-level failures."""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        field = _field_key(error.get("loc", ()))
        message = _message(field, error)
        messages = grouped.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return grouped


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problem = ValidationProblem(errors=collect_errors(exc.errors()))
    LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, problem.errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=problem.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
