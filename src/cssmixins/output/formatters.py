"""Human/JSON/CSS output helpers.

The CLI renders a style object for humans (Rich output), for machines
(``--json``), or as a CSS declaration block ready to paste into a
stylesheet (``--css``).
"""

from __future__ import annotations

import json as _json
import re
from dataclasses import dataclass

from rich.markup import escape

from cssmixins.domain.types import StyleObject
from cssmixins.output.console import create_console, get_output

_UPPER = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class OutputSettings:
    """Output mode switches taken from the CLI settings."""

    json_output: bool = False
    css_output: bool = False
    no_color: bool = False


def css_property_name(key: str) -> str:
    """Convert a CSS-in-JS key to its CSS property name.

    Examples:
        >>> css_property_name("backgroundColor")
        'background-color'
        >>> css_property_name("color")
        'color'
    """
    return _UPPER.sub("-", key).lower()


def to_css(style: StyleObject) -> str:
    """Render *style* as CSS declarations, one per line."""
    return "\n".join(f"{css_property_name(key)}: {value};" for key, value in style.items())


def format_style(op: str, style: StyleObject, *, settings: OutputSettings | None = None) -> str:
    """Format a mixin's style object for display.

    An empty style object means validation rejected the configuration.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps({"ok": bool(style), "op": op, "style": style}, indent=2)
    if settings.css_output and style:
        return to_css(style)

    console = create_console(no_color=settings.no_color)
    if not style:
        console.print(f"[css.error]ERROR:[/] [css.op]{op}[/] produced no style")
        return get_output(console).rstrip("\n")
    console.print(f"[css.ok]OK:[/] [css.op]{op}[/]")
    for key, value in style.items():
        console.print(f"  [css.property]{key}:[/] [css.value]{escape(value)}[/]", soft_wrap=True)
    return get_output(console).rstrip("\n")
