"""Domain enumerations for field types.

Enums represent fixed sets of domain values (e.g. relation selection mode).
"""

from enum import Enum, IntEnum


class SelectionMethod(IntEnum):
    """How the editor picks the related content item.

    Stored as an integer in the field definition's settings.
    """

    BROWSE = 1
    DROPDOWN = 2

    @classmethod
    def values(cls) -> list[int]:
        """Return all valid selection method values.

        Returns:
            List of enum integer values (e.g. for settings validation).
        """
        return [method.value for method in cls]


class FieldTypeEvent(str, Enum):
    """Content lifecycle events dispatched to field types."""

    PRE_PUBLISH = "prePublish"
    POST_PUBLISH = "postPublish"
    PRE_CREATE = "preCreate"
    POST_CREATE = "postCreate"

    @classmethod
    def values(cls) -> list[str]:
        """Return all event tags as strings."""
        return [event.value for event in cls]
