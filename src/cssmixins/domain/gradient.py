"""Gradient configuration record.

Fields are stored exactly as supplied; no coercion happens here, so the
validator sees the caller's raw values and can report on them.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

# camelCase keys accepted alongside the snake_case field names.
_ALIASES: dict[str, str] = {"colorStops": "color_stops"}


@dataclass(frozen=True)
class GradientConfiguration:
    """Input to the gradient mixins.

    Attributes:
        color_stops: Ordered color-stop strings, e.g. ``"#00FFFF 0%"``.
            Required, at least two entries.
        extent: Ending-shape size such as ``"farthest-corner at 45px 45px"``.
        fallback: Solid background color used before the gradient loads.
        position: Gradient center, e.g. ``"center"``.
        shape: ``"circle"`` or ``"ellipse"``.
    """

    color_stops: Sequence[str] | None = None
    extent: str | None = None
    fallback: str | None = None
    position: str | None = None
    shape: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> GradientConfiguration:
        """Build a configuration from whatever the caller passed.

        Accepts an existing configuration, a mapping, a pydantic model, or
        a dataclass instance. Anything else yields a configuration with
        every field absent.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseModel):
            value = value.model_dump()
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = dataclasses.asdict(value)
        if not isinstance(value, Mapping):
            return cls()

        names = {f.name for f in dataclasses.fields(cls)}
        fields: dict[str, Any] = {}
        for key, item in value.items():
            name = _ALIASES.get(key, key)
            if name in names:
                fields[name] = item
        return cls(**fields)
