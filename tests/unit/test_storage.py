from __future__ import annotations

import json
from pathlib import Path

import pytest

from moesif_seed.domain.models import ApplicationCreatedEvent
from moesif_seed.generator import EventGenerator
from moesif_seed.storage import EventFileError, read_events, write_events

BATCH_SIZE = 25
EXPECTED_TOP_LEVEL_KEYS = ["action_name", "user_id", "company_id", "request", "metadata"]
EXPECTED_METADATA_KEYS = [
    "template_id",
    "application_id",
    "application_name",
    "organization_id",
    "organization_name",
    "created_at",
]


def test_round_trip_is_field_for_field_identical(tmp_path: Path, generator: EventGenerator):
    events = generator.generate_batch(BATCH_SIZE)

    written = write_events(tmp_path / "events.json", events)
    loaded = read_events(written)

    assert loaded == [event.model_dump(mode="json") for event in events]
    assert [ApplicationCreatedEvent.model_validate(item) for item in loaded] == events


def test_file_keeps_stable_field_order(tmp_path: Path, generator: EventGenerator):
    path = write_events(tmp_path / "events.json", generator.generate_batch(3))

    raw = json.loads(path.read_text(encoding="utf-8"))

    for item in raw:
        assert list(item) == EXPECTED_TOP_LEVEL_KEYS
        assert list(item["request"]) == ["time"]
        assert list(item["metadata"]) == EXPECTED_METADATA_KEYS


def test_write_creates_parent_directories_and_indents(tmp_path: Path, generator: EventGenerator):
    target = tmp_path / "nested" / "dir" / "events.json"

    written = write_events(target, generator.generate_batch(1))

    assert written == target.resolve()
    assert written.read_text(encoding="utf-8").startswith("[\n  {")


def test_write_accepts_plain_dicts(tmp_path: Path):
    records = [{"user_id": "user_1"}, {"user_id": "user_2"}]
    assert read_events(write_events(tmp_path / "users.json", records)) == records


def test_empty_batch_round_trips(tmp_path: Path):
    assert read_events(write_events(tmp_path / "empty.json", [])) == []


def test_read_rejects_non_array_document(tmp_path: Path):
    path = tmp_path / "object.json"
    path.write_text('{"events": []}', encoding="utf-8")

    with pytest.raises(EventFileError, match="array of events"):
        read_events(path)


def test_read_rejects_invalid_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(EventFileError, match="not valid JSON"):
        read_events(path)


def test_read_reports_missing_file(tmp_path: Path):
    with pytest.raises(EventFileError, match="not found"):
        read_events(tmp_path / "missing.json")


def test_read_reports_directory_as_unreadable(tmp_path: Path):
    with pytest.raises(EventFileError, match="could not be read"):
        read_events(tmp_path)


def test_read_rejects_non_utf8_bytes(tmp_path: Path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"[\xff\xfe]")

    with pytest.raises(EventFileError, match="not UTF-8"):
        read_events(path)
