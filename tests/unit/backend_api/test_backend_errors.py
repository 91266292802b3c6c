"""Tests for backend_api errors."""

from canifly.backend_api import errors
from canifly.backend_api.errors import BackendClientError, BackendUnauthorizedError


def test_keyword_fields_become_attributes():
    error = BackendUnauthorizedError("call back not yet completed", status=401, path="/api/finalize-login")

    assert isinstance(error, BackendClientError)
    assert isinstance(error, RuntimeError)
    assert (error.status, error.path) == (401, "/api/finalize-login")
    assert str(error) == "call back not yet completed"


def test_public_error_types():
    assert errors.__all__ == ["BackendClientError", "BackendUnauthorizedError"]
