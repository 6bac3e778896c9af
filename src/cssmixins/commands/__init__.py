"""Subcommand modules for cssmixins.

Provides register_commands() which uses deferred imports to keep
``cssmixins --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register one command per mixin on the root CLI group."""
    from cssmixins.commands.radial_gradient import radial_gradient_cmd

    cli.add_command(radial_gradient_cmd)
