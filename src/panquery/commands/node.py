"""Command group: per-node queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from panquery.commands._base import PqGroup
from panquery.services.graph import GraphService

if TYPE_CHECKING:
    from panquery.commands._context import AppContext

_NODE_EXAMPLES = """\
  panquery node seq 12
  panquery node seq 12 --reverse
  panquery node len 12
  panquery node succ 12
  panquery node pred 12
  panquery node paths 12 --unique"""


@click.group(cls=PqGroup, examples=_NODE_EXAMPLES)
def node() -> None:
    """Query node sequences, neighbors, and the paths visiting them."""


@node.command(
    examples="""\
  panquery node seq 12
  panquery -q node seq 12 --reverse"""
)
@click.argument("node_id", type=int)
@click.option("--reverse", is_flag=True, help="Reverse-complement strand.")
@click.pass_obj
def seq(app: AppContext, node_id: int, reverse: bool) -> None:
    """Print a node's sequence."""
    app.emit(GraphService(app.source).sequence(node_id, reverse=reverse))


@node.command(name="len", examples="  panquery -q node len 12")
@click.argument("node_id", type=int)
@click.pass_obj
def length(app: AppContext, node_id: int) -> None:
    """Print a node's sequence length."""
    app.emit(GraphService(app.source).length(node_id))


@node.command(
    examples="""\
  panquery node succ 12
  panquery --json node succ 12"""
)
@click.argument("node_id", type=int)
@click.pass_obj
def succ(app: AppContext, node_id: int) -> None:
    """List edges leaving either strand of a node."""
    app.emit(GraphService(app.source).successors(node_id))


@node.command(
    examples="""\
  panquery node pred 12
  panquery -q node pred 12"""
)
@click.argument("node_id", type=int)
@click.pass_obj
def pred(app: AppContext, node_id: int) -> None:
    """List edges arriving at either strand of a node."""
    app.emit(GraphService(app.source).predecessors(node_id))


@node.command(
    examples="""\
  panquery node paths 12
  panquery -q node paths 12 --unique"""
)
@click.argument("node_id", type=int)
@click.option("--unique", is_flag=True, help="List each path once.")
@click.pass_obj
def paths(app: AppContext, node_id: int, unique: bool) -> None:
    """List the paths visiting a node (once per visit by default)."""
    app.emit(GraphService(app.source).paths_on_node(node_id, unique=unique))
