"""Tests for type tags."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from cssmixins.domain.types import TypeTag, describe_type, tag_of


@dataclass
class _Point:
    x: int = 0


class _Model(BaseModel):
    name: str = "a"


class TestTagOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("red", TypeTag.STRING),
            ("", TypeTag.STRING),
            ({"a": 1}, TypeTag.OBJECT),
            (_Point(), TypeTag.OBJECT),
            (_Model(), TypeTag.OBJECT),
            (["red"], TypeTag.ARRAY),
            (("red",), TypeTag.ARRAY),
            (len, TypeTag.FUNCTION),
            (lambda: None, TypeTag.FUNCTION),
            (3, TypeTag.NUMBER),
            (2.5, TypeTag.NUMBER),
            (True, TypeTag.BOOLEAN),
        ],
    )
    def test_classification(self, value: object, expected: TypeTag) -> None:
        assert tag_of(value) is expected

    def test_none_has_no_tag(self) -> None:
        assert tag_of(None) is None

    def test_bool_is_not_a_number(self) -> None:
        assert not TypeTag.NUMBER.matches(False)

    def test_dataclass_type_is_not_a_record(self) -> None:
        """The class itself is callable, not an instance record."""
        assert tag_of(_Point) is TypeTag.FUNCTION

    def test_set_has_no_tag(self) -> None:
        assert tag_of({"red"}) is None


class TestDescribeType:
    def test_uses_tag_name(self) -> None:
        assert describe_type(3) == "number"

    def test_none(self) -> None:
        assert describe_type(None) == "none"

    def test_falls_back_to_class_name(self) -> None:
        assert describe_type({1, 2}) == "set"
