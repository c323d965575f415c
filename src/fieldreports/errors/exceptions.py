"""Custom exception classes for the field reports API."""


class FieldReportsError(Exception):
    """Base exception for the field reports service."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(FieldReportsError):
    """Request payload failed validation."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(FieldReportsError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class PayloadTooLargeError(FieldReportsError):
    """Declared request body exceeds the configured limit."""

    def __init__(self, limit: int):
        super().__init__(
            "PAYLOAD_TOO_LARGE",
            f"Request body exceeds {limit} bytes",
            details={"limit": limit},
            status_code=413,
        )
