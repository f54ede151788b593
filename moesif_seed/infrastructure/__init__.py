"""
Infrastructure package for moesif-seed.

Centralizes the network concern: posting batches to the Moesif collector API.
Keep this layer focused on I/O and error normalization, decoupled from event
generation and CLI logic.
"""

from moesif_seed.infrastructure.moesif_client import (
    APPLICATION_ID_HEADER,
    DEFAULT_TIMEOUT_SECONDS,
    BatchType,
    ConfigurationError,
    MoesifClient,
    batch_endpoint,
)

__all__ = [
    "APPLICATION_ID_HEADER",
    "DEFAULT_TIMEOUT_SECONDS",
    "BatchType",
    "ConfigurationError",
    "MoesifClient",
    "batch_endpoint",
]
