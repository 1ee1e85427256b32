"""FastAPI exception handlers.

Catch PetstoreError subclasses (plus Pydantic's RequestValidationError and
unhandled exceptions) and return a failure envelope:
{ status: FAIL, code, errors: [{ code, message, target? }] }.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from petstore_api.exceptions import PetstoreError
from petstore_api.models.errors import ErrorDetail
from petstore_api.models.responses import ApiResponse
from petstore_api.models.status import Status

logger = logging.getLogger(__name__)

# Service error codes for failures that do not come from PetstoreError
REQUEST_VALIDATION_ERROR_CODE = 1001
INTERNAL_ERROR_CODE = 1000


# ---------------------------------------------------------------------------
# Envelope rendering
# ---------------------------------------------------------------------------


def _envelope(status_code: int, *errors: ErrorDetail) -> JSONResponse:
    """Build a JSON failure envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.failure(Status.FAIL, status_code, *errors).to_dict(),
    )


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


async def _petstore_error_handler(request: Request, exc: PetstoreError) -> JSONResponse:
    """Handle PetstoreError subclasses."""
    logger.warning(
        "Request failed: %s",
        exc.message,
        extra={
            "request_id": _request_id(request),
            "status_code": exc.status_code,
            "error_code": exc.error_code,
            "target": exc.target,
        },
    )
    return _envelope(
        exc.status_code,
        ErrorDetail(code=exc.error_code, message=exc.message, target=exc.target),
    )


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422), one error per field."""
    errors = [
        ErrorDetail(
            code=REQUEST_VALIDATION_ERROR_CODE,
            message=err["msg"],
            target=".".join(str(loc) for loc in err["loc"]) or None,
        )
        for err in exc.errors()
    ]
    return _envelope(422, *errors)


def _make_unhandled_error_handler(expose_details: bool):
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions. Log traceback, return 500."""
        logger.error(
            "Unhandled exception: %s\n%s",
            exc,
            traceback.format_exc(),
            extra={"request_id": _request_id(request)},
        )
        message = str(exc) if expose_details and str(exc) else "Internal server error"
        response = _envelope(500, ErrorDetail(code=INTERNAL_ERROR_CODE, message=message))
        # Runs outside RequestIdMiddleware, so echo the id here.
        request_id = _request_id(request)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response

    return _unhandled_error_handler


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI, *, expose_error_details: bool = False) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(PetstoreError, _petstore_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _make_unhandled_error_handler(expose_error_details))
