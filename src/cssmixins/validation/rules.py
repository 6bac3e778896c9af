"""Declarative rule records consumed by the checker."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cssmixins.domain.types import TypeTag


@dataclass(frozen=True)
class ValidationRule:
    """Type contract for one parameter.

    ``required`` doubles as the message reported when the parameter is
    missing; a rule without it only checks the type of a supplied value.
    """

    param: Any
    expected_type: TypeTag
    required: str | None = None
    name: str | None = None

    @property
    def is_required(self) -> bool:
        return self.required is not None


@dataclass(frozen=True)
class CustomRule:
    """An invariant a type tag cannot express (minimum length, cross-field)."""

    enforce: bool
    message: str


@dataclass(frozen=True)
class ArityCheck:
    """Calling-convention check: *args* must hold exactly *exactly* items."""

    args: Sequence[Any]
    exactly: int


@dataclass(frozen=True)
class ModuleDescriptor:
    """Top-level calling convention of a public mixin entry point."""

    module_path: str
    arity_check: ArityCheck
    type_check: ValidationRule
