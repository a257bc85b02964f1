import os
import pytest


"""Test fixtures and helpers for backend tests.

Provides `client`, a `TestClient` around a freshly built app, and `stub_event`,
a factory for request events that can drive `app.hooks.handle` without a
web framework.
"""

# Keep a developer's .env out of the test run; must happen before app.config is imported
os.environ.setdefault("ENV_FILE", "/tmp/pytest-no-env.env")

# app.main runs dictConfig on import, which resets root handlers; do it before
# pytest attaches caplog handlers to individual tests
import app.main  # noqa: E402,F401


class StubEvent:
    def __init__(self, headers=None, method="GET", path="/", query="", address="10.0.0.9"):
        self.headers = headers or {}
        self.method = method
        self.path = path
        self.query = query
        self._address = address
        self.fallback_calls = 0

    def client_address(self):
        self.fallback_calls += 1
        return self._address


class StubResponse:
    def __init__(self, status_code=200, headers=None):
        self.status_code = status_code
        self.headers = headers if headers is not None else {}


@pytest.fixture
def stub_event():
    return StubEvent


@pytest.fixture
def stub_response():
    return StubResponse


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from app.main import create_app

    with TestClient(create_app()) as c:
        yield c
