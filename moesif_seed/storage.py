"""
Events file persistence.

The events file is a single JSON document holding a top-level array of records,
indented for readability. Writing accepts event models or plain dicts; reading
returns plain dicts, which is what the Moesif client posts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List

from moesif_seed.domain.models import to_jsonable
from moesif_seed.utils.logging import get_logger

log = get_logger(__name__)


class EventFileError(ValueError):
    """The events file is missing, unreadable, or not a JSON array."""


def write_events(path: Path | str, events: Iterable[Any]) -> Path:
    """
    Write events to `path` as an indented JSON array and return the resolved path.

    Parent directories are created as needed. An existing file is overwritten.
    """
    target = Path(path).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = [to_jsonable(event) for event in events]

    with target.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")

    log.info("Events written", extra={"path": str(target), "count": len(payload)})
    return target


def read_events(path: Path | str) -> List[Any]:
    """
    Load the array of events stored at `path`.

    Raises
    ------
    EventFileError
        If the file is missing or unreadable, is not UTF-8 JSON, or its top level is
        not an array.
    """
    source = Path(path).resolve()
    try:
        with source.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise EventFileError(f"Events file not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise EventFileError(f"Events file is not UTF-8 text: {source}") from exc
    except json.JSONDecodeError as exc:
        raise EventFileError(f"Events file is not valid JSON: {source} ({exc})") from exc
    except OSError as exc:
        raise EventFileError(f"Events file could not be read: {source} ({exc.strerror or exc})") from exc

    if not isinstance(data, list):
        raise EventFileError("File must contain an array of events")

    log.info("Events read", extra={"path": str(source), "count": len(data)})
    return data


__all__ = ["EventFileError", "read_events", "write_events"]
