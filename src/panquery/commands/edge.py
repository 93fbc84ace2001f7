"""Command group: edge queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from panquery.commands._base import HANDLE, PqGroup
from panquery.services.graph import GraphService

if TYPE_CHECKING:
    from panquery.commands._context import AppContext
    from panquery.domain.handles import Handle


@click.group(cls=PqGroup, examples="  panquery edge paths 3+ 4+")
def edge() -> None:
    """Query directed edges between oriented nodes."""


@edge.command(
    examples="""\
  panquery edge paths 3+ 4+
  panquery -q edge paths 7- 2-"""
)
@click.argument("source", type=HANDLE)
@click.argument("target", type=HANDLE)
@click.pass_obj
def paths(app: AppContext, source: Handle, target: Handle) -> None:
    """List paths that step on SOURCE and then directly on TARGET."""
    app.emit(GraphService(app.source).paths_on_edge(source, target))
