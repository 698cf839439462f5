"""Error Handlers — map KitchenError and request failures onto HTTP responses.

Invariants:
    - KitchenError → its own http_status with the to_response() envelope
    - RequestValidationError (bad JSON, missing/invalid fields) → 400 with field details,
      before any store is touched
    - Exception (catch-all) → 500 INTERNAL_ERROR, message never forwarded
    - Every handler logs the resource the request targeted, when the path names one

Design Decisions:
    - Stores know nothing about HTTP: the status travels on the error, this module sends it
    - Resource derived from the path prefix: validation failures happen before a route
      runs, so no error object carries it
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from kitchen.core.domain_types import ResourceKind
from kitchen.core.errors import ErrorCategory, ErrorSeverity, KitchenError

logger = logging.getLogger(__name__)

RESOURCE_PREFIXES = {
    "/shopping-list": ResourceKind.SHOPPING_ITEM,
    "/recipes": ResourceKind.RECIPE,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(KitchenError, _kitchen_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def resource_for_path(path: str) -> str | None:
    """ResourceKind value for a request path, or None outside the resource routes."""
    for prefix, kind in RESOURCE_PREFIXES.items():
        if path == prefix or path.startswith(prefix + "/"):
            return kind.value
    return None


def _log_extra(request: Request, error_code: str, **fields) -> dict:
    return {
        "error_code": error_code,
        "path": request.url.path,
        "resource": resource_for_path(request.url.path),
        **fields,
    }


async def _kitchen_error_handler(request: Request, exc: KitchenError):
    extra = _log_extra(request, exc.code, record_id=exc.context.record_id)
    if exc.context.resource:
        extra["resource"] = exc.context.resource
    logger.warning(f"{request.method} {request.url.path}: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"{request.method} {request.url.path} rejected: "
        f"{', '.join(d['field'] for d in details)}",
        extra=_log_extra(request, "VALIDATION_ERROR"),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra=_log_extra(request, "INTERNAL_ERROR"),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )
