"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from atlaslint.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from atlaslint.config.settings import AtlasSettings
    from atlaslint.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AtlasSettings) -> None:
        self.settings = settings

        from atlaslint.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from atlaslint.services.telemetry import set_telemetry

        set_telemetry(settings.verbose)

    def output_settings(self, *, min_severity: str = "warning") -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            no_color=self.settings.no_color,
            min_severity=min_severity,
        )

    def emit(self, result: ServiceResult, *, min_severity: str = "warning") -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings(min_severity=min_severity)
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
