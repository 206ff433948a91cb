"""
Translation of errors into HTTP responses.

Request validation failures become a 400 with a ``{field: message}`` body.
Application errors raised by use cases are mapped by ``error_response``:
not-found and authorization failures carry an empty body, field-specific
failures carry ``{field: message}``. Anything else is logged and answered
with an empty 500.
"""
# Standard library imports
import logging
from typing import Any, Dict, Sequence, Union

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

# Local application imports
from ..application.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ReferenceNotFoundError,
    StoreError,
)

logger = logging.getLogger(__name__)

# Request parts FastAPI puts at the start of an error location
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_name(location: Sequence[Union[str, int]]) -> str:
    parts = list(location)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def validation_errors_to_dict(errors: Sequence[Dict[str, Any]]) -> Dict[str, str]:
    """
    Collapse pydantic error entries into a field -> message mapping

    The first message reported for a field is kept.
    """
    field_errors: Dict[str, str] = {}
    for error in errors:
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(error.get("loc", ()))
        field_errors.setdefault(field, error.get("msg", "Invalid value"))
    return field_errors


async def validation_exception_handler(
    request: Request, exception: RequestValidationError
) -> JSONResponse:
    field_errors = validation_errors_to_dict(exception.errors())
    logger.info(
        f"Validation failed for {request.method} {request.url.path}: {sorted(field_errors)}"
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=field_errors)


async def unhandled_exception_handler(request: Request, exception: Exception) -> Response:
    """Log an error no other handler claimed and answer with an empty 500"""
    logger.error(
        f"Unhandled error for {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(error: StoreError) -> Response:
    """
    Build the HTTP response for an application error

    Args:
        error: Error raised by a use case

    Returns:
        Response with the matching status code
    """
    if isinstance(error, NotFoundError):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(error, AuthorizationError):
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    if isinstance(error, ReferenceNotFoundError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_payload())
    if isinstance(error, ConflictError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error.to_payload())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_payload())


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
