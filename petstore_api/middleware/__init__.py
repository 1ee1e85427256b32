"""Middleware package — error handlers and request ID."""

from petstore_api.middleware.error_handler import register_error_handlers
from petstore_api.middleware.request_id import RequestIdMiddleware

__all__ = [
    "RequestIdMiddleware",
    "register_error_handlers",
]
