"""Public entry-point wrapper shared by every mixin.

A mixin is written as a function of one configuration value. Its public
form accepts ``*args`` so a malformed call (no config, extra arguments,
a non-mapping) is reported instead of raising.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from cssmixins.domain.types import StyleObject, TypeTag
from cssmixins.validation import ArityCheck, ModuleDescriptor, ValidationRule, validate_module

CONFIG_REQUIRED = (
    "requires a config object as its only parameter. However, you did not provide one."
)

Mixin = Callable[..., StyleObject]


def export_mixin(module_path: str, target: Callable[[Any], StyleObject]) -> Mixin:
    """Wrap *target* so calls are gated by the one-config-object convention."""

    @functools.wraps(target)
    def entry(*args: Any) -> StyleObject:
        return validate_module(
            ModuleDescriptor(
                module_path=module_path,
                arity_check=ArityCheck(args=args, exactly=1),
                type_check=ValidationRule(
                    param=args[0] if args else None,
                    expected_type=TypeTag.OBJECT,
                    required=CONFIG_REQUIRED,
                ),
            ),
            target,
            args,
        )

    entry.module_path = module_path  # type: ignore[attr-defined]
    return entry
