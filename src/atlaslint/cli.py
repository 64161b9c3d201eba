"""Root CLI group for atlaslint with global flags and command registration."""

from __future__ import annotations

import click

from atlaslint import __version__
from atlaslint.commands import register_commands
from atlaslint.commands._base import AtlasGroup
from atlaslint.commands._context import AppContext
from atlaslint.config.settings import AtlasSettings


@click.group(
    cls=AtlasGroup,
    invoke_without_command=True,
    examples="""\
  atlaslint check atlas.md
  atlaslint --json check atlas.md
  atlaslint types""",
)
@click.version_option(version=__version__, prog_name="atlaslint")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the pass/fail verdict.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and per-pass timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_color: bool,
) -> None:
    """atlaslint — Atlas Markdown validator."""
    settings = AtlasSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_color=no_color,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
