"""
Integration test posting a tiny batch to a real Moesif collector.

Run with: RUN_INTEGRATION_TESTS=1 MOESIF_APP_ID=... pytest tests/integration/
Optionally point MOESIF_API_URL at a staging collector.
"""

from __future__ import annotations

import os

import pytest

from moesif_seed.config import DEFAULT_API_URL
from moesif_seed.generator import EventGenerator
from moesif_seed.infrastructure.moesif_client import MoesifClient

LIVE_BATCH_SIZE = 2

pytestmark = pytest.mark.skipif(
    os.getenv("RUN_INTEGRATION_TESTS", "0") != "1" or not os.getenv("MOESIF_APP_ID"),
    reason="Integration tests require RUN_INTEGRATION_TESTS=1 and MOESIF_APP_ID",
)


def test_live_actions_batch_is_accepted():
    client = MoesifClient(
        os.environ["MOESIF_APP_ID"],
        os.getenv("MOESIF_API_URL", DEFAULT_API_URL),
    )
    events = EventGenerator().generate_batch(LIVE_BATCH_SIZE)

    result = client.post_actions_batch(events)

    assert result.success, result.to_dict()
    assert 200 <= result.status < 300


def test_live_unreachable_host_resolves_to_failure():
    client = MoesifClient("unused", "http://127.0.0.1:9/v1", timeout=2)

    result = client.post_actions_batch([])

    assert result.success is False
    assert result.status is None
