"""Reject request bodies whose declared size exceeds the configured limit."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from fieldreports.errors.exceptions import PayloadTooLargeError, ValidationError
from fieldreports.errors.handlers import render_error

logger = logging.getLogger(__name__)


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                size = int(declared)
            except ValueError:
                return render_error(request, ValidationError("Invalid Content-Length header"))
            if size > self.max_bytes:
                logger.warning("Rejected oversized body (%d bytes) on %s", size, request.url.path)
                return render_error(request, PayloadTooLargeError(self.max_bytes))
        return await call_next(request)
