"""Destination of a relation: the accepted ways of naming the related content.

Callers may pass a content reference, a numeric content id or a string id.
to_destination normalizes each of those into exactly one variant and
resolve_content_id turns a variant into the id stored in the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from fieldtypes.application.interfaces.field_type import IContentReference
from fieldtypes.domain.exceptions import InvalidArgumentType


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never a content id
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ById:
    """Numeric content id."""

    content_id: int

    def __post_init__(self) -> None:
        if not _is_int(self.content_id):
            raise InvalidArgumentType("content_id", "int", self.content_id)


@dataclass(frozen=True)
class ByExternalId:
    """String id (e.g. a remote id from an import)."""

    external_id: str

    def __post_init__(self) -> None:
        if not isinstance(self.external_id, str):
            raise InvalidArgumentType("external_id", "str", self.external_id)


@dataclass(frozen=True)
class FromReference:
    """Content reference object; only its id is read."""

    reference: IContentReference

    def __post_init__(self) -> None:
        if not isinstance(self.reference, IContentReference) or not _is_int(
            self.reference.id
        ):
            raise InvalidArgumentType("reference", "ContentInfo", self.reference)


Destination = Union[ById, ByExternalId, FromReference]

_EXPECTED = "ContentInfo|int|str"


def to_destination(destination_content: Any) -> Destination:
    """Normalize caller input into a Destination variant.

    Raises:
        InvalidArgumentType: For anything other than a variant, a content
            reference with an int id, an int, or a str (e.g. None, float, bool, list).
    """
    if isinstance(destination_content, (ById, ByExternalId, FromReference)):
        return destination_content
    if _is_int(destination_content):
        return ById(destination_content)
    if isinstance(destination_content, str):
        return ByExternalId(destination_content)
    if isinstance(destination_content, IContentReference) and _is_int(
        destination_content.id
    ):
        return FromReference(destination_content)
    raise InvalidArgumentType("destination_content", _EXPECTED, destination_content)


def resolve_content_id(destination: Destination) -> int | str:
    """Return the id a relation value stores for destination."""
    if isinstance(destination, ById):
        return destination.content_id
    if isinstance(destination, ByExternalId):
        return destination.external_id
    if isinstance(destination, FromReference):
        return destination.reference.id
    raise InvalidArgumentType("destination", "ById|ByExternalId|FromReference", destination)
