"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Holds the lazily loaded graph source and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from panquery.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from panquery.config.settings import PanquerySettings
    from panquery.infrastructure.graph.source import GraphSource
    from panquery.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The graph is not read until a command first asks for it, so
    ``--help`` and ``--version`` never touch the graph file.
    """

    def __init__(self, settings: PanquerySettings) -> None:
        self.settings = settings
        self._source: GraphSource | None = None

        from panquery.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            graph=settings.graph.path,
        )

        if settings.verbose:
            from panquery.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def source(self) -> GraphSource:
        """The graph source (created on first access, loaded on first query)."""
        if self._source is None:
            from panquery.infrastructure.graph.source import GraphSource

            self._source = GraphSource(self.settings.graph.path)
        return self._source

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
