"""Pytest configuration and shared fixtures for wirk-client tests."""

import pytest

from wirk_client import WirkClient
from wirk_client.testing import RecordingTransport, json_response


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents a developer's WIRK_* settings from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "WIRK_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def transport():
    """Recording transport answering every request with an empty JSON object."""
    return RecordingTransport(lambda request: json_response({}))


@pytest.fixture
def client(transport):
    """WirkClient wired to the recording transport."""
    return WirkClient(transport=transport)
