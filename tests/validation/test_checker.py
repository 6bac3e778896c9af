"""Tests for the rule checker and the validate_module gate."""

from __future__ import annotations

from typing import Any

import pytest
from structlog.testing import capture_logs

from cssmixins.domain.types import TypeTag
from cssmixins.validation import (
    ArityCheck,
    CustomRule,
    ModuleDescriptor,
    ValidationRule,
    arity_check,
    check_arity,
    check_custom,
    check_types,
    custom_rule,
    type_check,
    validate_module,
)

MODULE = "mixins/test"


def _violations(logs: list[dict[str, Any]]) -> list[str]:
    return [e["violation"] for e in logs if e["event"] == "validation.failed"]


class TestCheckTypes:
    def test_all_rules_pass(self) -> None:
        with capture_logs() as logs:
            result = check_types(
                MODULE,
                [
                    ValidationRule(param=["a", "b"], expected_type=TypeTag.ARRAY, required="req"),
                    ValidationRule(param="center", expected_type=TypeTag.STRING),
                ],
            )
        assert result.ok is True
        assert result.violations == []
        assert logs == []

    def test_missing_required_reports_message(self) -> None:
        with capture_logs() as logs:
            result = check_types(
                MODULE,
                [ValidationRule(param=None, expected_type=TypeTag.ARRAY, required="needs stops.")],
            )
        assert result.ok is False
        assert result.violations == ["mixins/test: needs stops."]
        assert _violations(logs) == ["mixins/test: needs stops."]
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["module"] == MODULE

    def test_optional_absent_is_skipped(self) -> None:
        result = check_types(MODULE, [ValidationRule(param=None, expected_type=TypeTag.STRING)])
        assert result.ok is True

    def test_type_mismatch_message(self) -> None:
        result = check_types(MODULE, [ValidationRule(param=3, expected_type=TypeTag.STRING)])
        assert result.violations == ["mixins/test: expected type string, got type number"]

    def test_type_mismatch_names_parameter(self) -> None:
        result = check_types(
            MODULE,
            [ValidationRule(param=["x"], expected_type=TypeTag.STRING, name="shape")],
        )
        assert result.violations == [
            "mixins/test: expected shape to be of type string, got type array"
        ]

    def test_required_and_present_still_type_checked(self) -> None:
        result = check_types(
            MODULE,
            [ValidationRule(param="red", expected_type=TypeTag.ARRAY, required="req")],
        )
        assert result.ok is False
        assert "expected type array, got type string" in result.violations[0]

    def test_every_rule_evaluated(self) -> None:
        """A failure does not stop later rules from being reported."""
        with capture_logs() as logs:
            result = check_types(
                MODULE,
                [
                    ValidationRule(param=None, expected_type=TypeTag.ARRAY, required="first"),
                    ValidationRule(param=1, expected_type=TypeTag.STRING),
                    ValidationRule(param="ok", expected_type=TypeTag.STRING),
                    ValidationRule(param="x", expected_type=TypeTag.BOOLEAN),
                ],
            )
        assert result.ok is False
        assert len(result.violations) == 3
        assert len(_violations(logs)) == 3

    def test_bool_shorthand(self) -> None:
        assert type_check(MODULE, [ValidationRule(param=True, expected_type=TypeTag.BOOLEAN)])
        assert not type_check(MODULE, [ValidationRule(param=1, expected_type=TypeTag.BOOLEAN)])


class TestCheckCustom:
    def test_enforced(self) -> None:
        with capture_logs() as logs:
            assert custom_rule(MODULE, CustomRule(enforce=True, message="never")) is True
        assert logs == []

    def test_violated(self) -> None:
        with capture_logs() as logs:
            result = check_custom(MODULE, CustomRule(enforce=False, message="too short."))
        assert result.ok is False
        assert result.violations == ["mixins/test: too short."]
        assert _violations(logs) == ["mixins/test: too short."]


class TestCheckArity:
    def test_exact(self) -> None:
        assert arity_check(MODULE, ArityCheck(args=({},), exactly=1)) is True

    @pytest.mark.parametrize("args", [(), ({}, {})])
    def test_wrong_count(self, args: tuple[Any, ...]) -> None:
        result = check_arity(MODULE, ArityCheck(args=args, exactly=1))
        assert result.ok is False
        assert result.violations == [
            f"mixins/test: expects exactly 1 argument, got {len(args)}."
        ]

    def test_plural_noun(self) -> None:
        result = check_arity(MODULE, ArityCheck(args=(1,), exactly=2))
        assert result.violations == ["mixins/test: expects exactly 2 arguments, got 1."]


def _descriptor(args: tuple[Any, ...]) -> ModuleDescriptor:
    return ModuleDescriptor(
        module_path=MODULE,
        arity_check=ArityCheck(args=args, exactly=1),
        type_check=ValidationRule(
            param=args[0] if args else None,
            expected_type=TypeTag.OBJECT,
            required="requires a config object.",
        ),
    )


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, config: Any) -> dict[str, str]:
        self.calls.append(config)
        return {"color": "red"}


class TestValidateModule:
    def test_valid_call(self) -> None:
        target = _Recorder()
        with capture_logs() as logs:
            result = validate_module(_descriptor(({"a": 1},)), target, ({"a": 1},))
        assert result == {"color": "red"}
        assert target.calls == [{"a": 1}]
        assert _violations(logs) == []

    def test_target_invoked_after_type_failure(self) -> None:
        target = _Recorder()
        with capture_logs() as logs:
            result = validate_module(_descriptor(("red",),), target, ("red",))
        assert result == {"color": "red"}
        assert target.calls == ["red"]
        assert _violations(logs) == ["mixins/test: expected type object, got type string"]

    def test_missing_argument_short_circuits_type_check(self) -> None:
        target = _Recorder()
        with capture_logs() as logs:
            validate_module(_descriptor(()), target, ())
        assert target.calls == [None]
        assert _violations(logs) == ["mixins/test: expects exactly 1 argument, got 0."]

    def test_extra_arguments_dropped(self) -> None:
        target = _Recorder()
        with capture_logs() as logs:
            validate_module(_descriptor(({}, {})), target, ({}, {"x": 1}))
        assert target.calls == [{}]
        assert _violations(logs) == ["mixins/test: expects exactly 1 argument, got 2."]

    @pytest.mark.usefixtures("production_mode")
    def test_production_skips_checks(self) -> None:
        target = _Recorder()
        with capture_logs() as logs:
            validate_module(_descriptor(()), target, ())
        assert target.calls == [None]
        assert logs == []
