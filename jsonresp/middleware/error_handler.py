"""FastAPI helpers that answer with the JSON envelope.

``envelope_response`` and ``error_response`` run the regular encode path into
a ``RecordingSink`` and hand the result back as a FastAPI ``Response``. The
exception handlers make every failure leave the service as
``{"error": {"code", "message"}}`` with a matching HTTP status.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from jsonresp.config.settings import get_settings
from jsonresp.encoder import write_error, write_response_page
from jsonresp.errors import APIError
from jsonresp.models.envelope import PageDetails
from jsonresp.sink import RecordingSink

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------


def envelope_response(
    data: Any,
    code: int = 200,
    page: PageDetails | None = None,
) -> Response:
    """Build a FastAPI response carrying ``data`` (and ``page``) in the envelope."""
    sink = RecordingSink()
    write_response_page(sink, data, page, code)
    return sink.to_response()


def error_response(message: str, code: int) -> Response:
    """Build a FastAPI response carrying an error envelope."""
    sink = RecordingSink()
    write_error(sink, message, code)
    return sink.to_response()


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


async def _api_error_handler(_request: Request, exc: APIError) -> Response:
    """Handle APIError raised from route code."""
    code = exc.code if 100 <= exc.code <= 999 else 500
    return error_response(exc.message, code)


async def _http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> Response:
    """Handle Starlette / FastAPI HTTPException (404 for unknown routes, etc.)."""
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> Response:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    fields = [" -> ".join(str(loc) for loc in err["loc"]) for err in exc.errors()]
    message = "Validation error"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return error_response(message, 422)


async def _unhandled_error_handler(_request: Request, exc: Exception) -> Response:
    """Catch-all for unhandled exceptions: log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
    )
    return error_response(get_settings().internal_error_message, 500)


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(APIError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
