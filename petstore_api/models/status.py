"""Outcome labels carried in every API response envelope."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Generic status of an API call.

    The wire value is the member name, e.g. ``"SUCCESS"``.
    """

    SUCCESS = "SUCCESS"
    FAIL = "FAIL"
