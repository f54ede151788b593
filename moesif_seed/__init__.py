"""
moesif-seed - synthetic Moesif test data generator and batch poster.

This package generates randomized `application_created` action events, stores
them as a JSON array file, and posts them in bulk to the Moesif collector API:

- Event generation with process-unique identifiers and time-ordered batches
- A JSON events file that round-trips field for field
- A batch client whose posts always resolve to a success or failure result
- A Typer CLI (`generate`, `post`, `info`) wiring the pieces together
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from moesif_seed.config import Settings, get_settings
from moesif_seed.domain.models import (
    ApplicationCreatedEvent,
    BatchFailure,
    BatchResult,
    BatchSuccess,
)
from moesif_seed.generator import EventGenerator, IdGenerator
from moesif_seed.infrastructure.moesif_client import (
    BatchType,
    ConfigurationError,
    MoesifClient,
)
from moesif_seed.storage import EventFileError, read_events, write_events
from moesif_seed.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ApplicationCreatedEvent",
    "BatchFailure",
    "BatchResult",
    "BatchSuccess",
    # Generation
    "EventGenerator",
    "IdGenerator",
    # Transmission
    "BatchType",
    "ConfigurationError",
    "MoesifClient",
    # Events file
    "EventFileError",
    "read_events",
    "write_events",
    # Logging
    "configure_logging",
    "get_logger",
]
