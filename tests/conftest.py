"""
Pytest configuration for moesif-seed.

Provides fixtures for:
- A deterministic event generator (fixed clock and seed)
- A recording stand-in for `requests.post` used by the Moesif client
- Settings isolated from the developer's `.env` file
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
import requests

from moesif_seed.config import Settings
from moesif_seed.generator import EventGenerator
from moesif_seed.infrastructure import moesif_client

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
TEST_APP_ID = "test-app-id"
TEST_API_URL = "https://api.example.test/v1"


def make_response(status: int, body: Any = None, raw: Optional[bytes] = None) -> requests.Response:
    """Build a real `requests.Response` carrying a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    response.encoding = "utf-8"
    return response


class RecordingPost:
    """
    Replacement for `requests.post`.

    Records every call and either returns `outcome` or raises it when it is an
    exception instance.
    """

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.outcome: Any = make_response(200, {"ok": True})

    def __call__(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


@pytest.fixture
def fake_post(monkeypatch) -> RecordingPost:
    recorder = RecordingPost()
    monkeypatch.setattr(moesif_client.requests, "post", recorder)
    return recorder


@pytest.fixture
def generator() -> EventGenerator:
    return EventGenerator(seed=123, clock=lambda: FIXED_NOW)


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings with a credential and a test API URL, ignoring any local `.env`.
    """
    return Settings(
        _env_file=None,
        MOESIF_APP_ID=TEST_APP_ID,
        MOESIF_API_URL=TEST_API_URL,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def response_factory():
    return make_response
