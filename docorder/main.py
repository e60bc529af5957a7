from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from docorder.config import AppConfig, load_config
from docorder.http.problem import (
    handle_domain_error,
    handle_http_exception,
    handle_request_validation_error,
    handle_unexpected_error,
)
from docorder.http.request_id import RequestIdMiddleware
from docorder.logging_setup import configure_logging
from docorder.logic.rank import RankError
from docorder.logic.validation import ReorderError
from docorder.routes import api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the reorder service application.

    ``config`` defaults to ``load_config()``; it is exposed to handlers as
    ``app.state.config``.
    """
    configure_logging()
    app = FastAPI(title="Document Reorder Service")
    app.state.config = config or load_config()

    app.add_exception_handler(ReorderError, handle_domain_error)
    app.add_exception_handler(RankError, handle_domain_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():  # pragma: no cover - trivial
        return {"status": "ok"}

    logger.info(
        "app.created order_field=%s strict=%s",
        app.state.config.documents.order_field,
        app.state.config.reorder.strict_preconditions,
    )
    return app


def run() -> None:  # pragma: no cover - process entry point
    import uvicorn

    host = os.environ.get("DOCORDER_HOST", "127.0.0.1")
    port = int(os.environ.get("DOCORDER_PORT", "8000"))
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


# Intentionally do not instantiate the app at import time to prevent side effects.
