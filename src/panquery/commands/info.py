"""info — summary counts for the configured graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from panquery.commands._base import PqCommand
from panquery.services.graph import GraphService

if TYPE_CHECKING:
    from panquery.commands._context import AppContext


@click.command(
    cls=PqCommand,
    examples="""\
  panquery -g pangenome.gfa info
  panquery --json info""",
)
@click.pass_obj
def info(app: AppContext) -> None:
    """Show node, edge, and path counts."""
    app.emit(GraphService(app.source).info())
