"""Custom Click base classes and parameter types.

PqCommand and PqGroup accept an ``examples`` parameter; ``--examples``
prints them and exits, keeping ``--help`` concise. HandleParamType
parses oriented handles written as ``12+`` or ``7-``.
"""

from __future__ import annotations

from typing import Any

import click

from panquery.domain.handles import Handle, parse_handle


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class PqCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class PqGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = PqCommand`` so all subcommands accept
    ``examples`` without explicit ``cls=`` each time.
    """

    command_class = PqCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class HandleParamType(click.ParamType):
    """Oriented node handle, e.g. ``12+`` (forward) or ``7-`` (reverse)."""

    name = "handle"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Handle:
        if isinstance(value, Handle):
            return value
        try:
            return parse_handle(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


HANDLE = HandleParamType()
