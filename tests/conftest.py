"""Pytest configuration.

The completion endpoint is always replaced by a mock transport; no test
touches the network.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from file_converter.core.dependencies import get_conversion_service
from file_converter.main import app
from tests.helpers.completion import RecordingTransport


@pytest.fixture
def endpoint() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(endpoint: RecordingTransport):
    app.dependency_overrides[get_conversion_service] = endpoint.service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
