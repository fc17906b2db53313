"""Tests for value objects (FieldValue, FieldValidationError, RelationValue, destinations, ContentInfo)."""

import dataclasses
from types import SimpleNamespace

import pytest

from fieldtypes.domain.entities.content import ContentInfo
from fieldtypes.domain.exceptions import InvalidArgumentType
from fieldtypes.domain.value_objects.core import FieldValidationError, FieldValue
from fieldtypes.field_types.relation import (
    ByExternalId,
    ById,
    FromReference,
    RelationValue,
    resolve_content_id,
    to_destination,
)


class TestFieldValue:
    def test_defaults(self) -> None:
        assert FieldValue().to_dict() == {"data": None, "externalData": None, "sortKey": None}

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            FieldValue().sort_key = "x"  # type: ignore[misc]


class TestFieldValidationError:
    def test_str_with_target(self) -> None:
        assert str(FieldValidationError("is unknown", target="foo")) == "foo: is unknown"

    def test_str_without_target(self) -> None:
        assert str(FieldValidationError("must be a mapping")) == "must be a mapping"


class TestRelationValue:
    """RelationValue: string form is the id, empty value renders as ''."""

    def test_str(self) -> None:
        assert str(RelationValue(12)) == "12"
        assert str(RelationValue("remote-1")) == "remote-1"
        assert str(RelationValue()) == ""

    def test_equality_by_id(self) -> None:
        assert RelationValue(1) == RelationValue(1)
        assert RelationValue(1) != RelationValue("1")

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RelationValue(1).destination_content_id = 2  # type: ignore[misc]


class TestContentInfo:
    def test_valid(self) -> None:
        info = ContentInfo(id=5, remote_id="r5")
        assert info.id == 5
        assert info.name is None

    @pytest.mark.parametrize("bad", ["5", None, True, 5.0])
    def test_non_int_id_rejected(self, bad) -> None:
        with pytest.raises(InvalidArgumentType):
            ContentInfo(id=bad)


class TestDestination:
    """to_destination picks exactly one variant per input kind."""

    def test_int(self) -> None:
        assert to_destination(3) == ById(3)

    def test_str(self) -> None:
        assert to_destination("r3") == ByExternalId("r3")

    def test_reference(self) -> None:
        info = ContentInfo(id=3)
        assert to_destination(info) == FromReference(info)

    def test_variant_passes_through(self) -> None:
        variant = ById(8)
        assert to_destination(variant) is variant

    @pytest.mark.parametrize(
        "destination, expected",
        [
            (ById(1), 1),
            (ByExternalId("ext"), "ext"),
            (FromReference(SimpleNamespace(id=4)), 4),
        ],
    )
    def test_resolve(self, destination, expected) -> None:
        assert resolve_content_id(destination) == expected

    def test_resolve_rejects_non_variant(self) -> None:
        with pytest.raises(InvalidArgumentType):
            resolve_content_id(5)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "factory, bad",
        [(ById, True), (ById, "1"), (ByExternalId, 1), (FromReference, SimpleNamespace(id=None))],
    )
    def test_variants_check_their_payload(self, factory, bad) -> None:
        with pytest.raises(InvalidArgumentType):
            factory(bad)
