"""Content reference entity.

Minimal read-model of a content item as seen by field types: only the
identity is carried, never the content itself.
"""

from dataclasses import dataclass

from fieldtypes.domain.exceptions import InvalidArgumentType


@dataclass(frozen=True)
class ContentInfo:
    """Reference to a content item (satisfies IContentReference).

    Field types read the id and never load the content behind it.
    """

    id: int
    remote_id: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidArgumentType("id", "int", self.id)
