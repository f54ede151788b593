"""
Utilities package for moesif-seed.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of domain-specific logic.
"""

from moesif_seed.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
