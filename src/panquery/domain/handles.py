"""Oriented node handles.

A handle names one face of a node: the forward strand or the
reverse-complement strand. Handles are derived on demand and never
persisted; two handles with the same node id and opposite orientation
denote the same node traversed on opposite strands.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

HANDLE_PATTERN = re.compile(r"^(?P<node_id>\d+)(?P<orientation>[+-])$")


@dataclass(frozen=True, slots=True, order=True)
class Handle:
    """A node id bundled with an orientation bit."""

    node_id: int
    is_reverse: bool = False

    @property
    def is_forward(self) -> bool:
        return not self.is_reverse

    def flip(self) -> Handle:
        """Return the handle for the opposite face of the same node."""
        return Handle(self.node_id, not self.is_reverse)

    def __str__(self) -> str:
        return f"{self.node_id}{'-' if self.is_reverse else '+'}"


def parse_handle(text: str) -> Handle:
    """Parse ``12+`` / ``7-`` notation into a :class:`Handle`.

    Raises:
        ValueError: If *text* is not a positive id followed by ``+`` or ``-``.
    """
    match = HANDLE_PATTERN.match(text.strip())
    if match is None:
        msg = f"Invalid handle '{text}' (expected e.g. '12+' or '7-')"
        raise ValueError(msg)
    node_id = int(match.group("node_id"))
    if node_id <= 0:
        msg = f"Invalid handle '{text}' (node ids are positive integers)"
        raise ValueError(msg)
    return Handle(node_id, match.group("orientation") == "-")
