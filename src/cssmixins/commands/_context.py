"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Installs the process settings, configures logging,
and centralizes style emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cssmixins.config.settings import use_settings
from cssmixins.output.formatters import OutputSettings, format_style

if TYPE_CHECKING:
    from cssmixins.config.settings import CssMixinsSettings
    from cssmixins.domain.types import StyleObject


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CssMixinsSettings) -> None:
        self.settings = settings
        use_settings(settings)

        from cssmixins.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, op: str, style: StyleObject) -> None:
        """Format and output a style object with correct exit semantics.

        * Non-empty style: writes to stdout, returns normally.
        * Empty style (rejected configuration): writes to stderr, exits 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            css_output=self.settings.css_output,
        )
        output = format_style(op, style, settings=settings)
        if style:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
