"""
Shared test fixtures and utilities for siteverify tests
"""

import json

import pytest
from unittest.mock import MagicMock

from siteverify.application.interfaces import ISiteVerifyClient, SiteVerifyConnectionError
from siteverify.config import clear_config_cache
from siteverify.domain.services import ResponseParser
from siteverify.logging_utils import StructuredLogger


class FakeSiteVerifyClient(ISiteVerifyClient):
    """
    In-memory ISiteVerifyClient returning a canned body.

    Args:
        body: Raw response body to return, or a dict to JSON-encode
        error: Exception raised from submit() instead of returning
    """

    def __init__(self, body=None, error=None):
        self.body = json.dumps(body) if isinstance(body, dict) else body
        self.error = error
        self.requests = []

    def submit(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload YAML config for every test."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def parser():
    return ResponseParser()


@pytest.fixture
def mock_logger():
    return MagicMock(spec=StructuredLogger)


@pytest.fixture
def success_body():
    return {
        "success": True,
        "challenge_ts": "2024-01-01T00:00:00Z",
        "hostname": "example.com",
        "score": 0.9,
        "action": "login",
    }


@pytest.fixture
def make_client():
    def _make(body=None, error=None):
        return FakeSiteVerifyClient(body=body, error=error)
    return _make


@pytest.fixture
def unreachable_client():
    return FakeSiteVerifyClient(error=SiteVerifyConnectionError("connection refused"))
