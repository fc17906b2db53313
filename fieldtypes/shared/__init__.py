"""Shared helpers: telemetry and cross-cutting concerns.

Used by domain, application, and field types. No business logic.
"""

from fieldtypes.shared.telemetry import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
