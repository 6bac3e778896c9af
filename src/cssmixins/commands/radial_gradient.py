"""Command: render the radial-gradient mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cssmixins.commands._base import MixinCommand

if TYPE_CHECKING:
    from cssmixins.commands._context import AppContext


@click.command(
    "radial-gradient",
    cls=MixinCommand,
    examples="""\
  cssmixins radial-gradient -s red -s blue
  cssmixins radial-gradient -s '#00FFFF 0%' -s '#0000FF 95%' --shape circle
  cssmixins --css radial-gradient -s red -s blue --position center --fallback white
  cssmixins --json radial-gradient -s red -s blue""",
)
@click.option(
    "-s",
    "--stop",
    "color_stops",
    multiple=True,
    help="Color-stop, e.g. '#00FFFF 0%'. Repeat for each stop (at least 2).",
)
@click.option("--extent", default=None, help="Ending-shape size, e.g. 'farthest-corner'.")
@click.option("--fallback", default=None, help="Background color shown without gradients.")
@click.option("--position", default=None, help="Gradient center, e.g. 'center'.")
@click.option("--shape", default=None, help="'circle' or 'ellipse'.")
@click.pass_obj
def radial_gradient_cmd(
    app: AppContext,
    color_stops: tuple[str, ...],
    extent: str | None,
    fallback: str | None,
    position: str | None,
    shape: str | None,
) -> None:
    """Compute background styles for a radial gradient."""
    from cssmixins.mixins import radial_gradient

    config: dict[str, object] = {
        "color_stops": list(color_stops),
        "extent": extent,
        "fallback": fallback,
        "position": position,
        "shape": shape,
    }
    app.emit("radial-gradient", radial_gradient(config))
