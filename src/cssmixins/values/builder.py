"""Ordered-fragment joining for CSS function arguments.

A CSS function such as ``radial-gradient(...)`` takes a run of optional,
space-separated leading properties followed by a comma-separated tail.
:func:`join_fragments` renders that shape without doubled separators,
dangling commas, or stray whitespace, whichever fragments are missing.
"""

from __future__ import annotations

from collections.abc import Sequence

Fragment = tuple[str, object | None]


def join_fragments(
    leading: Sequence[Fragment],
    tail: object | None,
    *,
    tail_separator: str = ", ",
) -> str:
    """Join ``(separator, value)`` pairs and a tail into one argument string.

    Separators are written unconditionally; a value is written followed by
    a single space only when it is present (truthy). The tail follows
    *tail_separator* when any leading value was written, and stands alone
    otherwise.

    Examples:
        >>> join_fragments([("", "center"), ("", None), ("", None)], "red, blue")
        'center, red, blue'
        >>> join_fragments([("", None), ("", None)], "red, blue")
        'red, blue'
    """
    template = ""
    any_leading = False
    for separator, value in leading:
        template += separator
        if value:
            template += f"{value} "
            any_leading = True

    if tail:
        if any_leading:
            template = template[:-1] + f"{tail_separator}{tail}"
        else:
            template += f"{tail}"
    return template.strip()


def construct_gradient_value(
    position: str | None,
    shape: str | None,
    extent: str | None,
    color_stops: str | None,
) -> str:
    """Render gradient arguments in the fixed order position, shape, extent, stops.

    *color_stops* is the already joined color-stop list.

    Examples:
        >>> construct_gradient_value("center", "ellipse", None, "red, blue")
        'center ellipse, red, blue'
    """
    return join_fragments([("", position), ("", shape), ("", extent)], color_stops)


def css_function(name: str, arguments: str) -> str:
    """Wrap *arguments* in a CSS function call, e.g. ``radial-gradient(...)``."""
    return f"{name}({arguments})"
