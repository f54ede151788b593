"""
Domain package for moesif-seed.

Exports the event payload models and the batch result variants shared by the
generator, the Moesif client, and the CLI.
"""

from moesif_seed.domain.models import (
    ACTION_NAME,
    ActionRequest,
    ApplicationCreatedEvent,
    ApplicationMetadata,
    BatchFailure,
    BatchResult,
    BatchSuccess,
    to_jsonable,
)

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
