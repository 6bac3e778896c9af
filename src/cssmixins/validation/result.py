"""ValidationResult — structured outcome of a validation pass."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of one or more checks against a module's inputs.

    Attributes:
        ok: True when every check passed.
        module: Module path the checks ran for (e.g. ``"mixins/radialGradient"``).
        violations: Fully formatted ``"<module>: <message>"`` lines.
    """

    model_config = {"frozen": True}

    ok: bool = True
    module: str
    violations: list[str] = Field(default_factory=list)

    @classmethod
    def passed(cls, module: str) -> ValidationResult:
        return cls(ok=True, module=module)

    @classmethod
    def failed(cls, module: str, *violations: str) -> ValidationResult:
        return cls(ok=False, module=module, violations=list(violations))

    def merge(self, other: ValidationResult) -> ValidationResult:
        """AND the outcomes and concatenate violations, keeping this module."""
        return self.model_copy(
            update={
                "ok": self.ok and other.ok,
                "violations": [*self.violations, *other.violations],
            }
        )

    def __bool__(self) -> bool:
        return self.ok
