"""Subcommand modules for atlaslint.

Provides register_commands() which uses deferred imports to keep
``atlaslint --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from atlaslint.commands.check import check
    from atlaslint.commands.types_cmd import types_cmd

    cli.add_command(check)
    cli.add_command(types_cmd)
