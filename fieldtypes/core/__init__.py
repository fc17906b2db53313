"""Core: configuration.

Single place for settings.
"""

from fieldtypes.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
