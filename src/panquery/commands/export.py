"""export — write the loaded graph back out as GFA."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from panquery.commands._base import PqCommand
from panquery.services.graph import GraphService

if TYPE_CHECKING:
    from panquery.commands._context import AppContext


@click.command(
    cls=PqCommand,
    examples="""\
  panquery -g pangenome.gfa.gz export pangenome.gfa
  panquery --json export normalized.gfa""",
)
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def export(app: AppContext, output: Path) -> None:
    """Write the graph to OUTPUT as GFA 1.0."""
    app.emit(GraphService(app.source).export(output))
