"""Domain entities.

Pure domain models; no persistence concerns.
"""

from fieldtypes.domain.entities.content import ContentInfo

__all__ = [
    "ContentInfo",
]
