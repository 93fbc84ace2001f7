"""Root CLI group for panquery with global flags and command registration."""

from __future__ import annotations

import click

from panquery import __version__
from panquery.commands import register_commands
from panquery.commands._context import AppContext
from panquery.config.settings import PanquerySettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="panquery")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and operation timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-g",
    "--graph",
    "graph_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Graph resource (GFA, optionally gzipped). Overrides [graph] path.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    graph_path: str | None,
) -> None:
    """panquery — query pangenome variation graphs."""
    ctx.ensure_object(dict)
    settings = PanquerySettings.from_cli(
        config_path=config_path,
        graph_path=graph_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
