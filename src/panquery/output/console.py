"""Rich Console factory and theme for panquery output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PQ_THEME = Theme(
    {
        "pq.ok": "bold green",
        "pq.error": "bold red",
        "pq.warning": "bold yellow",
        "pq.op": "bold cyan",
        "pq.key": "dim",
        "pq.node": "bold blue",
        "pq.path": "bold",
        "pq.strand.forward": "green",
        "pq.strand.reverse": "magenta",
        "pq.seq": "",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PQ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_strand(is_forward: bool) -> str:
    return "pq.strand.forward" if is_forward else "pq.strand.reverse"
