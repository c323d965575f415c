"""FastAPI exception handlers producing the standard ErrorResponse."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fieldreports.errors.exceptions import FieldReportsError
from fieldreports.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    trace_id = getattr(request.state, "trace_id", "unknown")
    error_response = ErrorResponse(
        error=ErrorDetail(
            code=code,
            message=message,
            details=details,
            trace_id=trace_id,
            timestamp=datetime.now(timezone.utc),
        ),
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(mode="json", exclude_none=True),
    )


def render_error(request: Request, exc: FieldReportsError) -> JSONResponse:
    """Render a FieldReportsError; also used by middleware outside the handler stack."""
    if exc.status_code >= 500:
        logger.error("request_failed", extra={"path": request.url.path, "code": exc.code})
    return _error_response(request, exc.status_code, exc.code, exc.message, exc.details)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(FieldReportsError)
    async def field_reports_error_handler(request: Request, exc: FieldReportsError):
        return render_error(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies are client errors, reported in the same envelope as ValidationError
        errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
        return _error_response(
            request,
            400,
            "VALIDATION_ERROR",
            "Request body failed validation",
            errors,
        )
