"""Petstore API response envelope and service scaffolding."""

from petstore_api.exceptions import (
    NotFoundError,
    PetstoreError,
    RequiredFieldMissingError,
    ValidationError,
)
from petstore_api.models import FIELD_ORDER, ApiResponse, ErrorDetail, Status

__all__ = [
    "FIELD_ORDER",
    "ApiResponse",
    "ErrorDetail",
    "NotFoundError",
    "PetstoreError",
    "RequiredFieldMissingError",
    "Status",
    "ValidationError",
]
