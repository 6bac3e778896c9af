"""Root CLI group for cssmixins with global flags and command registration."""

from __future__ import annotations

import click

from cssmixins import __version__
from cssmixins.commands import register_commands
from cssmixins.commands._context import AppContext
from cssmixins.config.settings import CssMixinsSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cssmixins")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("--css", "css_output", is_flag=True, help="Output CSS declarations.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--mode",
    default=None,
    help="Runtime mode; 'production' skips validation.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    css_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    mode: str | None,
) -> None:
    """cssmixins — compute CSS style objects from configuration."""
    settings = CssMixinsSettings.from_cli(
        config_path=config_path,
        mode=mode,
        json_output=json_output,
        css_output=css_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
