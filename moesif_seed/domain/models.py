"""
Domain models for moesif-seed.

Defines the synthetic `application_created` action payload exactly as the Moesif
actions batch endpoint expects it, and the normalized outcome of one batch post.
Field declaration order is the serialization order of the events file.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

ACTION_NAME = "application_created"

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "arbitrary_types_allowed": False,
}


class ActionRequest(BaseModel):
    """Request context of an action; only the timestamp is populated."""

    time: str = Field(..., description="ISO-8601 UTC timestamp of the action.")

    model_config = _FROZEN


class ApplicationMetadata(BaseModel):
    template_id: str = Field(..., description="Template the application was created from.")
    application_id: str = Field(..., description="Identifier of the created application.")
    application_name: str = Field(..., description="Slug of the created application.")
    organization_id: str = Field(..., description="Identifier of the owning organization.")
    organization_name: str = Field(..., description="Display name of the owning organization.")
    created_at: str = Field(..., description="Creation timestamp, same as request.time.")

    model_config = _FROZEN


class ApplicationCreatedEvent(BaseModel):
    """
    One synthetic `application_created` action.
    """

    action_name: Literal["application_created"] = Field(ACTION_NAME)
    user_id: str = Field(..., description="Identifier of the acting user.")
    company_id: str = Field(..., description="Identifier of the user's company.")
    request: ActionRequest
    metadata: ApplicationMetadata

    model_config = _FROZEN

    @property
    def request_time(self) -> str:
        return self.request.time


class BatchSuccess(BaseModel):
    """Outcome of a batch post the API accepted."""

    success: Literal[True] = True
    status: int
    data: Optional[Any] = None

    model_config = _FROZEN

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in self.model_dump().items() if value is not None}


class BatchFailure(BaseModel):
    """
    Outcome of a batch post that failed.

    `status` is only set when the API answered; a missing status means the request
    never got a response (DNS, refused connection, timeout). `code` and `errno`
    carry transport-level details when they are known.
    """

    success: Literal[False] = False
    error: str
    status: Optional[int] = None
    data: Optional[Any] = None
    code: Optional[str] = None
    errno: Optional[int] = None

    model_config = _FROZEN

    @property
    def received_response(self) -> bool:
        return self.status is not None

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in self.model_dump().items() if value is not None}


BatchResult = Union[BatchSuccess, BatchFailure]


def to_jsonable(record: Any) -> Any:
    """Plain JSON-ready form of a record; models are dumped, anything else passes through."""
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return record


__all__ = [
    "ACTION_NAME",
    "ActionRequest",
    "ApplicationCreatedEvent",
    "ApplicationMetadata",
    "BatchFailure",
    "BatchResult",
    "BatchSuccess",
    "to_jsonable",
]
