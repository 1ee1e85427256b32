"""Generic API response envelope model.

All endpoints are required to return their responses in this envelope:
{ status, code, data, errors }

- status: generic outcome label such as SUCCESS or FAIL.
- code: the HTTP status code of the call.
- data: response payload, only present on successful calls.
- errors: list of ErrorDetail, only present on failed calls. Each error has a
  service error ``code``, a ``message`` and optionally the ``target`` param
  which caused it.

Successful response::

    {"status": "SUCCESS", "code": 200, "data": {"id": 1234, "name": "demo"}}

Failure response::

    {"status": "FAIL", "code": 500, "errors": [
        {"code": 1000, "message": "demo message1", "target": "petIdentifier"}
    ]}

Fields holding None are left out of the serialized payload entirely and keys
always come out in FIELD_ORDER, whatever order they were populated in.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from petstore_api.exceptions import RequiredFieldMissingError
from petstore_api.models.errors import ErrorDetail
from petstore_api.models.status import Status

T = TypeVar("T")

FIELD_ORDER = ("status", "code", "data", "errors")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all API responses.

    Build instances with :meth:`success` or :meth:`failure`. Both ``data`` and
    ``errors`` are plain optional fields, so the model alone does not stop a
    caller from populating both. Assignments are validated, so a later
    ``resp.status = None`` is rejected.
    """

    model_config = ConfigDict(validate_assignment=True)

    status: Status = Field(description="Status of API call", examples=["SUCCESS"])
    code: int = Field(strict=True, description="Http Status Code", examples=[200])
    data: T | None = Field(default=None, description="Response Payload")
    errors: tuple[ErrorDetail, ...] | None = Field(default=None, description="Errors")

    @classmethod
    def success(
        cls,
        status: Status | None,
        code: int | None,
        data: T | None = None,
    ) -> ApiResponse[T]:
        """Build a success-shaped envelope. ``errors`` stays unset."""
        _require(status=status, code=code)
        return cls(status=status, code=code, data=data)

    @classmethod
    def failure(
        cls,
        status: Status | None,
        code: int | None,
        *errors: ErrorDetail | Mapping[str, Any] | Iterable[ErrorDetail],
    ) -> ApiResponse[T]:
        """Build a failure-shaped envelope. ``data`` stays unset.

        Errors may be passed one by one or as a single iterable; call-site
        order is kept.
        """
        _require(status=status, code=code)
        return cls(status=status, code=code, errors=_collect_errors(errors))

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler):
        # Unannotated return keeps the field schema in OpenAPI output.
        raw: dict[str, Any] = handler(self)
        return {
            key: raw[key]
            for key in FIELD_ORDER
            if not _is_absent(key, raw.get(key))
        }


def _require(**fields: object) -> None:
    for name, value in fields.items():
        if value is None:
            raise RequiredFieldMissingError(name)


def _collect_errors(
    errors: tuple[ErrorDetail | Mapping[str, Any] | Iterable[ErrorDetail], ...],
) -> tuple[ErrorDetail | Mapping[str, Any], ...]:
    collected: list[ErrorDetail | Mapping[str, Any]] = []
    for item in errors:
        if isinstance(item, (ErrorDetail, Mapping)):
            collected.append(item)
        elif item is None or isinstance(item, (str, bytes)):
            raise TypeError(
                f"errors must be ErrorDetail instances or iterables of them, got {type(item).__name__}"
            )
        else:
            collected.extend(item)
    return tuple(collected)


def _is_absent(key: str, value: Any) -> bool:
    if value is None:
        return True
    # An empty errors list carries no information for the consumer.
    return key == "errors" and len(value) == 0
