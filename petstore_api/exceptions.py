"""Application error hierarchy.

All petstore-specific errors extend PetstoreError. Each carries the HTTP status
code and service error code used when it is rendered as a failure envelope by
the handlers in ``petstore_api.middleware.error_handler``.
"""

from __future__ import annotations


class PetstoreError(Exception):
    """Base error for all petstore-specific errors."""

    status_code: int = 500
    error_code: int = 1000
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, target: str | None = None) -> None:
        self.message = message or self.__class__.message
        self.target = target
        super().__init__(self.message)


class ValidationError(PetstoreError):
    """Business validation failure on a request field."""

    status_code = 422
    error_code = 1001
    message = "Validation error"


class NotFoundError(PetstoreError):
    """Requested resource does not exist."""

    status_code = 404
    error_code = 1002
    message = "Resource not found"


class RequiredFieldMissingError(PetstoreError):
    """A required envelope field was absent at construction time.

    Signals a programming error in the calling endpoint, so it maps to a 500.
    """

    status_code = 500
    error_code = 1003
    message = "Required field missing"

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} must not be None", target=field_name)
        self.field_name = field_name
