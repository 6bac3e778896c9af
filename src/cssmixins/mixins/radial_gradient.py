"""Radial gradient mixin.

CSS for declaring a radial gradient, including a fallback
background-color. The fallback is either the first color-stop or an
explicitly passed fallback color.

Usage::

    radial_gradient({
        "color_stops": ["#00FFFF 0%", "rgba(0, 0, 255, 0) 50%", "#0000FF 95%"],
        "extent": "farthest-corner at 45px 45px",
        "position": "center",
        "shape": "ellipse",
    })
    # {
    #     "backgroundColor": "#00FFFF",
    #     "backgroundImage": "radial-gradient(center ellipse farthest-corner "
    #     "at 45px 45px, #00FFFF 0%, rgba(0, 0, 255, 0) 50%, #0000FF 95%)",
    # }
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cssmixins.config.settings import get_settings
from cssmixins.domain.gradient import GradientConfiguration
from cssmixins.domain.types import StyleObject, TypeTag
from cssmixins.mixins._base import export_mixin
from cssmixins.validation import CustomRule, ValidationRule, check_custom, check_types
from cssmixins.values import construct_gradient_value, css_function

MODULE_PATH = "mixins/radialGradient"
MIN_COLOR_STOPS = 2
_STOPS_REQUIRED = "expects an array of at least 2 color-stops."


def parse_fallback(color_stops: Sequence[str]) -> str:
    """Return the color of the first stop, without its stop position.

    Examples:
        >>> parse_fallback(["#00FFFF 0%", "#0000FF 95%"])
        '#00FFFF'
    """
    return color_stops[0].split(" ")[0]


def _is_valid(config: GradientConfiguration) -> bool:
    result = check_types(
        MODULE_PATH,
        [
            ValidationRule(
                param=config.color_stops,
                expected_type=TypeTag.ARRAY,
                required=_STOPS_REQUIRED,
                name="color_stops",
            ),
            ValidationRule(param=config.extent, expected_type=TypeTag.STRING, name="extent"),
            ValidationRule(param=config.fallback, expected_type=TypeTag.STRING, name="fallback"),
            ValidationRule(param=config.position, expected_type=TypeTag.STRING, name="position"),
            ValidationRule(param=config.shape, expected_type=TypeTag.STRING, name="shape"),
        ],
    )
    # Custom rules below assume color_stops is a sequence.
    if not result:
        return False
    stops = config.color_stops or ()
    count = len(stops)
    result = check_custom(
        MODULE_PATH,
        CustomRule(
            enforce=count >= MIN_COLOR_STOPS,
            message=f"{_STOPS_REQUIRED} However, the one you provided only had {count}.",
        ),
    ).merge(
        check_custom(
            MODULE_PATH,
            CustomRule(
                enforce=all(isinstance(stop, str) for stop in stops),
                message="expects every color-stop to be a string.",
            ),
        )
    )
    return result.ok


def _radial_gradient(config: Any) -> StyleObject:
    gradient = GradientConfiguration.from_value(config)
    if get_settings().validation_enabled and not _is_valid(gradient):
        return {}

    color_stops = gradient.color_stops
    return {
        "backgroundColor": gradient.fallback or parse_fallback(color_stops),
        "backgroundImage": css_function(
            "radial-gradient",
            construct_gradient_value(
                gradient.position,
                gradient.shape,
                gradient.extent,
                ", ".join(color_stops),
            ),
        ),
    }


radial_gradient = export_mixin(MODULE_PATH, _radial_gradient)
