"""Problem+JSON utilities and global exception handlers.

Defines the RFC7807 media type and handler callables that produce
application/problem+json responses.
"""

from __future__ import annotations

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from fastapi.responses import JSONResponse

from docorder.http.error_mapping import DEFAULT_CODE, DEFAULT_ERROR, REORDER_ERROR_MAP

PROBLEM_MEDIA_TYPE = "application/problem+json"

logger = logging.getLogger(__name__)


def problem_for_code(code: str, detail: str) -> dict:
    """Return a problem body for a domain error code via the central mapping."""
    mapped = REORDER_ERROR_MAP.get(code, DEFAULT_ERROR)
    return {
        "title": mapped["title"],
        "status": int(mapped["status"]),
        "detail": detail,
        "code": code,
    }


async def handle_domain_error(request: Request, exc: ValueError) -> JSONResponse:  # noqa: D401
    code = str(getattr(exc, "code", "") or DEFAULT_CODE)
    problem = problem_for_code(code, str(exc))
    logger.info("error_handler.handle code=%s path=%s", code, request.url.path)
    return JSONResponse(problem, status_code=problem["status"], media_type=PROBLEM_MEDIA_TYPE)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: D401
    status_code = int(getattr(exc, "status_code", 500) or 500)
    if isinstance(exc.detail, dict):
        detail = exc.detail
    else:
        detail = {"title": "Error", "status": status_code, "detail": str(exc.detail or "")}
    headers = {str(k): str(v) for k, v in (exc.headers or {}).items()}
    return JSONResponse(
        detail,
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers or None,
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
    # ctx may hold exception instances that are not JSON serialisable
    errors = [{k: v for k, v in err.items() if k not in {"ctx", "input"}} for err in exc.errors()]
    problem = {
        "title": "Invalid Request",
        "status": 422,
        "detail": "Request validation failed",
        "code": "REQUEST_VALIDATION_FAILED",
        "errors": errors,
    }
    return JSONResponse(problem, status_code=422, media_type=PROBLEM_MEDIA_TYPE)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    logger.error("unexpected_error path=%s", request.url.path, exc_info=exc)
    return JSONResponse({"title": "Internal Server Error", "status": 500}, status_code=500, media_type=PROBLEM_MEDIA_TYPE)


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "problem_for_code",
    "handle_domain_error",
    "handle_http_exception",
    "handle_request_validation_error",
    "handle_unexpected_error",
]
