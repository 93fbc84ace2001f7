"""Subcommand modules for panquery.

Provides register_commands() which uses deferred imports to keep
``panquery --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from panquery.commands.edge import edge
    from panquery.commands.node import node
    from panquery.commands.path import path

    cli.add_command(node)
    cli.add_command(edge)
    cli.add_command(path)

    # --- Standalone commands ---
    from panquery.commands.export import export
    from panquery.commands.info import info

    cli.add_command(info)
    cli.add_command(export)
