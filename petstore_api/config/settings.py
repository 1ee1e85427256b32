"""Pydantic Settings for the petstore API.

All environment variables use the PETSTORE_ prefix.
Example: PETSTORE_PORT=8080, PETSTORE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PetstoreSettings(BaseSettings):
    """Service configuration validated from environment variables."""

    # Service
    service_name: str = "petstore-api"
    port: int = Field(default=8000, ge=1, le=65535)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True  # False switches to plain text lines

    # Error rendering
    expose_error_details: bool = False  # Put exception text in 500 envelopes

    model_config = {"env_prefix": "PETSTORE_"}
