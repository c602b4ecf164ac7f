"""Response envelope and exception handlers used by every API router.

All endpoints answer with the same JSON shape::

    {"success": true, "message": "...", "data": ..., "meta": {...}}

Errors use the same shape with ``success = false`` and ``data = null``.
Domain code raises exceptions; the mapping to HTTP status codes happens
here, once, at the boundary.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from shared.errors import AccessDenied

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def respond(message: str, data: Any = None, *, status_code: int = 200, meta: dict | None = None) -> JSONResponse:
    """Wrap a successful result in the standard envelope."""
    content = {"success": True, "message": message, "data": jsonable_encoder(data)}
    if meta is not None:
        content["meta"] = jsonable_encoder(meta)
    return JSONResponse(status_code=status_code, content=content)


def failure(message: str, status_code: int) -> JSONResponse:
    """Wrap an error message in the standard envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None},
    )


def flatten_messages(messages: Any) -> str:
    """Turn Protean's ``{field: [msg, ...]}`` error payloads into one line."""
    if isinstance(messages, dict):
        parts = []
        for value in messages.values():
            if isinstance(value, (list, tuple)):
                parts.extend(str(item) for item in value)
            else:
                parts.append(str(value))
        return "; ".join(parts)
    return str(messages)


def _exception_message(exc: Exception, fallback: str) -> str:
    messages = getattr(exc, "messages", None)
    if messages:
        return flatten_messages(messages)
    if exc.args and exc.args[0]:
        return flatten_messages(exc.args[0])
    return fallback


async def _on_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    message = _exception_message(exc, "Invalid request.")
    logger.info("Request rejected", path=request.url.path, reason=message)
    return failure(message, 400)


async def _on_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(problems) or "Invalid request."
    logger.info("Malformed request", path=request.url.path, reason=message)
    return failure(message, 400)


async def _on_access_denied(request: Request, exc: AccessDenied) -> JSONResponse:
    logger.info("Access denied", path=request.url.path, reason=exc.message)
    return failure(exc.message, 403)


async def _on_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return failure(_exception_message(exc, "Not found."), 404)


async def _on_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return failure(UNEXPECTED_ERROR_MESSAGE, 500)


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to enveloped 400/403/404/500 responses."""
    app.add_exception_handler(ValidationError, _on_validation_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation_error)
    app.add_exception_handler(AccessDenied, _on_access_denied)
    app.add_exception_handler(ObjectNotFoundError, _on_not_found)
    app.add_exception_handler(Exception, _on_unexpected_error)
