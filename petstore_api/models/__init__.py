"""Public models for the petstore API."""

from petstore_api.models.errors import ErrorDetail
from petstore_api.models.responses import FIELD_ORDER, ApiResponse
from petstore_api.models.status import Status

__all__ = [
    "FIELD_ORDER",
    "ApiResponse",
    "ErrorDetail",
    "Status",
]
