"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from main import app
from response_envelope.data_models.error_code import ErrorCode


@pytest.fixture
def client() -> TestClient:
    """Client against the demo app."""
    return TestClient(app)


@pytest.fixture
def lenient_client() -> TestClient:
    """Client that returns server-error handler responses instead of re-raising."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def missing() -> ErrorCode:
    """ErrorCode with a single placeholder, not part of the catalog."""
    return ErrorCode.new(1001, "missing %s")
