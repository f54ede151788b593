"""
Moesif batch API client.

Posts arrays of records to the Moesif collector batch endpoints. Every post goes
through a single helper so all three endpoints share one error-normalization
path: a post never raises, it returns a `BatchSuccess` or a `BatchFailure`.

Usage:
    from moesif_seed.infrastructure.moesif_client import MoesifClient

    client = MoesifClient(application_id="...")
    result = client.post_actions_batch(events)
    if not result.success:
        print(result.error, result.status)
"""

from __future__ import annotations

import errno as errno_codes
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import requests

from moesif_seed.config import DEFAULT_API_URL
from moesif_seed.domain.models import BatchFailure, BatchResult, BatchSuccess, to_jsonable
from moesif_seed.utils.logging import get_logger

log = get_logger(__name__)

APPLICATION_ID_HEADER = "X-Moesif-Application-Id"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ConfigurationError(ValueError):
    """The client cannot be built from the given settings (e.g. missing credential)."""


class BatchType(str, Enum):
    """Moesif entity types that accept batch posts."""

    ACTIONS = "actions"
    COMPANIES = "companies"
    USERS = "users"

    @property
    def path(self) -> str:
        return f"/{self.value}/batch"


def batch_endpoint(base_url: str, batch_type: BatchType | str) -> str:
    """Full URL of the batch endpoint for `batch_type` under `base_url`."""
    return f"{base_url.rstrip('/')}{BatchType(batch_type).path}"


def _find_os_error(exc: BaseException) -> Optional[OSError]:
    """
    Dig the socket-level OSError out of a requests exception chain.

    requests wraps urllib3 errors in its own exceptions, which in turn wrap the
    OSError raised by the socket; the errno only survives on that innermost one.
    """
    stack: List[Any] = [exc]
    seen = set()
    while stack:
        current = stack.pop()
        if not isinstance(current, BaseException) or id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, OSError) and isinstance(current.errno, int):
            return current
        stack.extend(getattr(current, "args", ()))
        stack.append(getattr(current, "reason", None))
        stack.append(current.__cause__)
        stack.append(current.__context__)
    return None


def _transport_details(exc: requests.RequestException) -> Dict[str, Any]:
    os_error = _find_os_error(exc)
    if os_error is None:
        return {"code": type(exc).__name__, "errno": None}
    return {
        "code": errno_codes.errorcode.get(os_error.errno, type(exc).__name__),
        "errno": os_error.errno,
    }


def _parse_body(response: requests.Response) -> Any:
    """Decoded JSON body, raw text when it is not JSON, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class MoesifClient:
    """
    Client bound to one Moesif application.

    Parameters
    ----------
    application_id : str
        Moesif Application Id, sent as the `X-Moesif-Application-Id` header.
    base_url : str
        API root; a trailing slash is ignored.
    timeout : float
        Per-request timeout in seconds. A timeout is reported as a failed result.

    Raises
    ------
    ConfigurationError
        If `application_id` is missing or blank. Raised before any network activity.
    """

    def __init__(
        self,
        application_id: Optional[str],
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        if not application_id or not application_id.strip():
            raise ConfigurationError(
                "MOESIF_APP_ID is required. Please set it in your .env file or environment variables."
            )
        self.application_id = application_id
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout

    @property
    def headers(self) -> Dict[str, str]:
        return {
            APPLICATION_ID_HEADER: self.application_id,
            "Content-Type": "application/json",
        }

    def endpoint(self, batch_type: BatchType | str) -> str:
        """Full URL of the batch endpoint for `batch_type`."""
        return batch_endpoint(self.base_url, batch_type)

    def _post_batch(self, path: str, records: Sequence[Any]) -> BatchResult:
        url = f"{self.base_url}{path}"

        try:
            payload = [to_jsonable(record) for record in records]
            log.info("Posting batch", extra={"url": url, "records": len(payload)})
            response = requests.post(
                url,
                json=payload,
                headers=self.headers,
                timeout=self.timeout,
            )
            data = _parse_body(response)
        except requests.RequestException as exc:
            log.warning(
                "Batch post failed without response",
                extra={"url": url, "error": str(exc), "error_type": type(exc).__name__},
            )
            return BatchFailure(error=str(exc) or type(exc).__name__, **_transport_details(exc))
        except Exception as exc:  # noqa: BLE001 - a post must always resolve to a result
            log.exception("Batch post could not be sent", extra={"url": url})
            return BatchFailure(error=f"{type(exc).__name__}: {exc}", code=type(exc).__name__)

        if 200 <= response.status_code < 300:
            log.info(
                "Batch accepted",
                extra={"url": url, "records": len(payload), "status": response.status_code},
            )
            return BatchSuccess(status=response.status_code, data=data)

        log.warning(
            "Batch rejected",
            extra={"url": url, "records": len(payload), "status": response.status_code},
        )
        return BatchFailure(
            error=f"Request failed with status code {response.status_code}",
            status=response.status_code,
            data=data,
        )

    def post_actions_batch(self, actions: Sequence[Any]) -> BatchResult:
        """Post action events in bulk."""
        return self._post_batch(BatchType.ACTIONS.path, actions)

    def post_companies_batch(self, companies: Sequence[Any]) -> BatchResult:
        """Post company profiles in bulk."""
        return self._post_batch(BatchType.COMPANIES.path, companies)

    def post_users_batch(self, users: Sequence[Any]) -> BatchResult:
        """Post user profiles in bulk."""
        return self._post_batch(BatchType.USERS.path, users)

    def post_batch(self, batch_type: BatchType | str, records: Sequence[Any]) -> BatchResult:
        """
        Post `records` to the endpoint for `batch_type`.

        Raises
        ------
        ValueError
            If `batch_type` is not one of actions, companies or users.
        """
        posters = {
            BatchType.ACTIONS: self.post_actions_batch,
            BatchType.COMPANIES: self.post_companies_batch,
            BatchType.USERS: self.post_users_batch,
        }
        return posters[BatchType(batch_type)](records)


__all__ = [
    "APPLICATION_ID_HEADER",
    "BatchType",
    "ConfigurationError",
    "DEFAULT_TIMEOUT_SECONDS",
    "MoesifClient",
    "batch_endpoint",
]
