"""Command group: path queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from panquery.commands._base import PqGroup
from panquery.services.path import PathService

if TYPE_CHECKING:
    from panquery.commands._context import AppContext

_PATH_EXAMPLES = """\
  panquery path list
  panquery path length chr1
  panquery path project chr1 1000000
  panquery path next chr1 12"""


@click.group(cls=PqGroup, examples=_PATH_EXAMPLES)
def path() -> None:
    """List paths, measure them, and map path offsets onto the graph."""


@path.command(name="list", examples="  panquery -q path list")
@click.pass_obj
def list_paths(app: AppContext) -> None:
    """List every path with its step count and length."""
    app.emit(PathService(app.source).list_paths())


@path.command(examples="  panquery -q path length chr1")
@click.argument("name")
@click.pass_obj
def length(app: AppContext, name: str) -> None:
    """Print a path's length in bases."""
    app.emit(PathService(app.source).length(name))


@path.command(
    examples="""\
  panquery path project chr1 1000000
  panquery --json path project chr1 0"""
)
@click.argument("name")
@click.argument("offset", type=int)
@click.pass_obj
def project(app: AppContext, name: str, offset: int) -> None:
    """Map a 0-based OFFSET on path NAME to node, node offset, and strand."""
    app.emit(PathService(app.source).project(name, offset))


@path.command(name="next", examples="  panquery -q path next chr1 12")
@click.argument("name")
@click.argument("node_id", type=int)
@click.pass_obj
def next_node(app: AppContext, name: str, node_id: int) -> None:
    """Print the node following NODE_ID's first visit on path NAME."""
    app.emit(PathService(app.source).next_node(name, node_id))
