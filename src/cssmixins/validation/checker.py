"""Rule checker and the public-entry-point gate.

The ``check_*`` functions return a :class:`ValidationResult`; the
``type_check`` / ``custom_rule`` / ``arity_check`` shorthands collapse it
to a bool for use in ``if`` guards. Both forms report every violation on
the ``cssmixins.validation`` logger as it is found.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from cssmixins.config.logging import get_logger
from cssmixins.config.settings import get_settings
from cssmixins.domain.types import describe_type
from cssmixins.validation.result import ValidationResult
from cssmixins.validation.rules import ArityCheck, CustomRule, ModuleDescriptor, ValidationRule

LOGGER_NAME = "cssmixins.validation"

_R = TypeVar("_R")


def _report(module_path: str, message: str) -> str:
    violation = f"{module_path}: {message}"
    get_logger(LOGGER_NAME).warning("validation.failed", module=module_path, violation=violation)
    return violation


def _type_mismatch(rule: ValidationRule) -> str:
    actual = describe_type(rule.param)
    if rule.name:
        return f"expected {rule.name} to be of type {rule.expected_type}, got type {actual}"
    return f"expected type {rule.expected_type}, got type {actual}"


def check_types(module_path: str, rules: Iterable[ValidationRule]) -> ValidationResult:
    """Check every rule, collecting all violations in a single pass."""
    violations: list[str] = []
    for rule in rules:
        if rule.param is None:
            if rule.required is not None:
                violations.append(_report(module_path, rule.required))
            continue
        if not rule.expected_type.matches(rule.param):
            violations.append(_report(module_path, _type_mismatch(rule)))
    if violations:
        return ValidationResult.failed(module_path, *violations)
    return ValidationResult.passed(module_path)


def check_custom(module_path: str, rule: CustomRule) -> ValidationResult:
    """Report *rule.message* unless *rule.enforce* holds."""
    if rule.enforce:
        return ValidationResult.passed(module_path)
    return ValidationResult.failed(module_path, _report(module_path, rule.message))


def check_arity(module_path: str, check: ArityCheck) -> ValidationResult:
    """Verify the call received exactly ``check.exactly`` arguments."""
    count = len(check.args)
    if count == check.exactly:
        return ValidationResult.passed(module_path)
    noun = "argument" if check.exactly == 1 else "arguments"
    message = f"expects exactly {check.exactly} {noun}, got {count}."
    return ValidationResult.failed(module_path, _report(module_path, message))


def type_check(module_path: str, rules: Iterable[ValidationRule]) -> bool:
    return check_types(module_path, rules).ok


def custom_rule(module_path: str, rule: CustomRule) -> bool:
    return check_custom(module_path, rule).ok


def arity_check(module_path: str, check: ArityCheck) -> bool:
    return check_arity(module_path, check).ok


def validate_module(
    descriptor: ModuleDescriptor,
    target: Callable[[Any], _R],
    args: tuple[Any, ...],
) -> _R:
    """Check the calling convention, then invoke *target* regardless.

    Failures here are diagnostics only: *target* always runs with the
    leading argument (``None`` when there was none) and its own internal
    checks decide what it returns. Extra arguments are dropped.
    No checks run in production mode.
    """
    if get_settings().validation_enabled:
        path = descriptor.module_path
        if check_arity(path, descriptor.arity_check):
            check_types(path, [descriptor.type_check])
        else:
            get_logger(LOGGER_NAME).debug("validation.skipped", module=path, check="type_check")
    return target(args[0] if args else None)
