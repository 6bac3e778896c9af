"""Type tags understood by the argument validator.

Each tag names a loose runtime category rather than a concrete class,
so the same rule set can describe mappings, sequences, and callables
coming from any caller.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

StyleObject = dict[str, str]


class TypeTag(StrEnum):
    """Categories a validated parameter may be required to fall into."""

    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def matches(self, value: Any) -> bool:
        """Return True if *value* belongs to this category.

        Examples:
            >>> TypeTag.ARRAY.matches(["red", "blue"])
            True
            >>> TypeTag.NUMBER.matches(True)
            False
        """
        return tag_of(value) is self


def _is_record(value: Any) -> bool:
    if isinstance(value, (Mapping, BaseModel)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def tag_of(value: Any) -> TypeTag | None:
    """Classify *value*, or return None if no tag fits (e.g. ``None``)."""
    # bool is checked before number: bool subclasses int.
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (int, float)):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if _is_record(value):
        return TypeTag.OBJECT
    if callable(value):
        return TypeTag.FUNCTION
    return None


def describe_type(value: Any) -> str:
    """Name the type of *value* for diagnostics, preferring its tag."""
    tag = tag_of(value)
    if tag is not None:
        return tag.value
    if value is None:
        return "none"
    return type(value).__name__
