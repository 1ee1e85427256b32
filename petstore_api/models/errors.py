"""Error detail record used inside failure envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

_FIELD_ORDER = ("code", "message", "target")


class ErrorDetail(BaseModel):
    """One cause of a failed API call.

    ``target`` names the request param or part which caused the error, mostly
    useful for validation errors. It is left out of the payload when unset.
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field(description="Service error code", examples=[1000])
    message: str = Field(description="Human readable error message", examples=["demo message1"])
    target: str | None = Field(
        default=None,
        description="Request param or part which caused the error",
        examples=["patientIdentifier"],
    )

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler):
        # Unannotated return keeps the field schema in OpenAPI output.
        raw: dict[str, Any] = handler(self)
        return {key: raw[key] for key in _FIELD_ORDER if raw.get(key) is not None}
