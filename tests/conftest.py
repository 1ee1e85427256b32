"""Shared test fixtures for the petstore test suite."""

from __future__ import annotations

import os

import pytest

from petstore_api.config.settings import PetstoreSettings


# ---------------------------------------------------------------------------
# Keep host PETSTORE_* variables from leaking into settings under test
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_petstore_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("PETSTORE_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> PetstoreSettings:
    """Test settings with plain-text logging."""
    return PetstoreSettings(service_name="petstore-test", log_json=False)
