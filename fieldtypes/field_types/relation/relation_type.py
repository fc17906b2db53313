"""The Relation field type: a reference from one content item to another.

Hash format (from_hash / to_hash):
    {"destinationContentId": <int | str | None>}
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from fieldtypes.core.config import get_settings
from fieldtypes.domain.enums import SelectionMethod
from fieldtypes.domain.exceptions import InvalidArgumentException, InvalidArgumentType
from fieldtypes.domain.value_objects.core import FieldValue
from fieldtypes.field_types.base import FieldType
from fieldtypes.field_types.relation.destination import resolve_content_id, to_destination
from fieldtypes.field_types.relation.value import RelationValue
from fieldtypes.schemas.relation import RelationHash
from fieldtypes.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

HASH_KEY = "destinationContentId"


class RelationType(FieldType):
    """Field type for a single relation to another content item.

    Values hold the destination content id only; the related content is
    never loaded here. Fields of this type are searchable.
    """

    settings_schema = MappingProxyType(
        {
            "selectionMethod": MappingProxyType(
                {"type": "int", "default": int(SelectionMethod.BROWSE)}
            ),
            # Location path or id scoping the selection UI
            "selectionRoot": MappingProxyType({"type": "string", "default": ""}),
        }
    )
    settings_constraints = MappingProxyType(
        {"selectionMethod": MappingProxyType({"enum": SelectionMethod.values()})}
    )

    def __init__(self, strict_hash: bool | None = None) -> None:
        """Initialize the type.

        Args:
            strict_hash: Reject malformed hashes in from_hash. Defaults to
                settings.field_type_strict_hash.
        """
        if strict_hash is None:
            strict_hash = get_settings().field_type_strict_hash
        self.strict_hash = strict_hash

    def build_value(self, input_value: Any) -> RelationValue:
        """Build a RelationValue from a content reference, a content id, or a string id.

        Args:
            input_value: ContentInfo (or any object with an int id), int, str,
                or a ById/ByExternalId/FromReference destination.

        Returns:
            RelationValue pointing at the destination content.

        Raises:
            InvalidArgumentType: For any other input (None, float, bool, list, ...).
        """
        return RelationValue(resolve_content_id(to_destination(input_value)))

    def get_field_type_identifier(self) -> str:
        return "ezobjectrelation"

    def get_default_default_value(self) -> RelationValue:
        return RelationValue()

    def accept_value(self, input_value: Any) -> RelationValue:
        """Check the type and structure of input_value.

        Returns:
            input_value itself; no normalization is done.

        Raises:
            InvalidArgumentType: If input_value is not a RelationValue, or its
                destination_content_id is neither int nor str.
        """
        if not isinstance(input_value, RelationValue):
            logger.debug("Rejected relation value of type %s", type(input_value).__name__)
            raise InvalidArgumentType("input_value", "RelationValue", input_value)

        content_id = input_value.destination_content_id
        if isinstance(content_id, bool) or not isinstance(content_id, (int, str)):
            logger.debug("Rejected destination id of type %s", type(content_id).__name__)
            raise InvalidArgumentType(
                "input_value.destination_content_id", "int|str", content_id
            )

        return input_value

    def _get_sort_info(self, value: RelationValue) -> str:
        return str(value)

    def from_hash(self, hash_value: Any) -> RelationValue:
        """Convert a hash to a RelationValue.

        In strict mode the hash must be a mapping holding destinationContentId
        with an int, str or None value. Otherwise the value is built from
        whatever the key holds (missing key gives the empty value).

        Raises:
            InvalidArgumentType: Strict mode, hash is not a mapping or the id has the wrong type.
            InvalidArgumentException: Strict mode, destinationContentId is missing.
        """
        if not self.strict_hash:
            return RelationValue(hash_value.get(HASH_KEY))

        if not isinstance(hash_value, Mapping):
            raise InvalidArgumentType("hash", "dict", hash_value)
        try:
            parsed = RelationHash.model_validate(dict(hash_value))
        except ValidationError as e:
            if HASH_KEY not in hash_value:
                raise InvalidArgumentException(
                    "hash", f"missing key '{HASH_KEY}'"
                ) from e
            raise InvalidArgumentType(
                f"hash['{HASH_KEY}']", "int|str|None", hash_value[HASH_KEY]
            ) from e
        return RelationValue(parsed.destination_content_id)

    def to_hash(self, value: RelationValue) -> dict[str, Any]:
        return {HASH_KEY: value.destination_content_id}

    def is_searchable(self) -> bool:
        return True

    def to_persistence_value(self, value: RelationValue) -> FieldValue:
        """Store the hash as both data and external data; no sort key at this layer."""
        return FieldValue(
            data=self.to_hash(value),
            external_data=self.to_hash(value),
            sort_key=None,
        )

    def is_empty_value(self, value: Any) -> bool:
        return value is None or getattr(value, "destination_content_id", None) is None
