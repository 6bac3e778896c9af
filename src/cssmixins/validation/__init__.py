"""Argument validation for mixin entry points.

Checks never raise for bad input. Each violation is reported as a
structlog warning and folded into a :class:`ValidationResult`.
"""

from __future__ import annotations

from cssmixins.validation.checker import (
    arity_check,
    check_arity,
    check_custom,
    check_types,
    custom_rule,
    type_check,
    validate_module,
)
from cssmixins.validation.result import ValidationResult
from cssmixins.validation.rules import ArityCheck, CustomRule, ModuleDescriptor, ValidationRule

__all__ = [
    "ArityCheck",
    "CustomRule",
    "ModuleDescriptor",
    "ValidationResult",
    "ValidationRule",
    "arity_check",
    "check_arity",
    "check_custom",
    "check_types",
    "custom_rule",
    "type_check",
    "validate_module",
]
