"""GFA 1.x reader and writer.

Only the records that carry graph content are interpreted:

- ``S`` segments (integer ids > 0; ``*`` means an empty sequence)
- ``L`` links (blunt overlaps only; other overlaps are warned about and
  treated as blunt)
- ``P`` paths (``1+,2-,3+`` step lists)
- ``W`` walks (``>1<2>3`` step lists), named ``sample#hap#seqid`` with a
  ``[start-end]`` suffix when the walk does not start at 0

Headers, containments, and every other record type are skipped.
"""

from __future__ import annotations

import gzip
import logging
import os
import re
import tempfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, TextIO

from panquery.domain.handles import Handle

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
BLUNT_OVERLAPS = frozenset({"", "*", "0M"})
_WALK_STEP = re.compile(r"([<>])(\d+)")


class GfaFormatError(ValueError):
    """A GFA record could not be interpreted."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        self.line_no = line_no
        prefix = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{prefix}{message}")


@dataclass
class GfaRecords:
    """Graph content collected from a GFA stream, in file order."""

    sequences: dict[int, str] = field(default_factory=dict)
    edges: list[tuple[Handle, Handle]] = field(default_factory=list)
    paths: dict[str, list[Handle]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


def open_text(path: Path) -> TextIO:
    """Open *path* for text reading, transparently un-gzipping it."""
    with path.open("rb") as probe:
        magic = probe.read(2)
    if magic == GZIP_MAGIC:
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open("r", encoding="utf-8")


def _parse_segment_id(token: str, line_no: int) -> int:
    try:
        node_id = int(token)
    except ValueError:
        msg = f"segment id '{token}' is not an integer"
        raise GfaFormatError(msg, line_no) from None
    if node_id <= 0:
        msg = f"segment id {node_id} must be positive"
        raise GfaFormatError(msg, line_no)
    return node_id


def _parse_orientation(token: str, line_no: int) -> bool:
    """Return ``is_reverse`` for a ``+``/``-`` token."""
    if token == "+":
        return False
    if token == "-":
        return True
    msg = f"invalid orientation '{token}'"
    raise GfaFormatError(msg, line_no)


def _parse_path_steps(text: str, line_no: int) -> list[Handle]:
    handles: list[Handle] = []
    for token in text.split(","):
        if len(token) < 2:
            msg = f"invalid path step '{token}'"
            raise GfaFormatError(msg, line_no)
        node_id = _parse_segment_id(token[:-1], line_no)
        handles.append(Handle(node_id, _parse_orientation(token[-1], line_no)))
    return handles


def _parse_walk_steps(text: str, line_no: int) -> list[Handle]:
    steps = _WALK_STEP.findall(text)
    if not steps or "".join(f"{o}{n}" for o, n in steps) != text:
        msg = f"invalid walk '{text}'"
        raise GfaFormatError(msg, line_no)
    return [Handle(_parse_segment_id(n, line_no), o == "<") for o, n in steps]


def walk_name(sample: str, hap_index: str, seq_id: str, start: str, end: str) -> str:
    """Build the path name under which a ``W`` record is exposed."""
    name = f"{sample}#{hap_index}#{seq_id}"
    if start not in ("*", "0"):
        name += f"[{start}-{end}]"
    return name


def _require(fields: list[str], count: int, line_no: int) -> None:
    if len(fields) < count:
        msg = f"'{fields[0]}' record needs {count - 1} fields, got {len(fields) - 1}"
        raise GfaFormatError(msg, line_no)


def parse_gfa(lines: Iterable[str]) -> GfaRecords:
    """Collect segments, links, paths, and walks from GFA text lines.

    Links and paths may appear before the segments they reference;
    references are checked once the whole stream has been read.

    Raises:
        GfaFormatError: On any malformed or dangling record.
    """
    records = GfaRecords()
    # Reference checks are deferred, so remember where each came from.
    edge_lines: list[int] = []
    path_lines: dict[str, int] = {}

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        fields = line.split("\t")
        kind = fields[0]

        if kind == "S":
            _require(fields, 3, line_no)
            node_id = _parse_segment_id(fields[1], line_no)
            if node_id in records.sequences:
                msg = f"duplicate segment id {node_id}"
                raise GfaFormatError(msg, line_no)
            records.sequences[node_id] = "" if fields[2] == "*" else fields[2]

        elif kind == "L":
            _require(fields, 5, line_no)
            a = Handle(
                _parse_segment_id(fields[1], line_no),
                _parse_orientation(fields[2], line_no),
            )
            b = Handle(
                _parse_segment_id(fields[3], line_no),
                _parse_orientation(fields[4], line_no),
            )
            overlap = fields[5] if len(fields) > 5 else ""
            if overlap not in BLUNT_OVERLAPS:
                warning = f"line {line_no}: overlap '{overlap}' on {a} -> {b} treated as blunt"
                records.warnings.append(warning)
                logger.warning("Non-blunt overlap %r ignored on line %d", overlap, line_no)
            records.edges.append((a, b))
            edge_lines.append(line_no)

        elif kind == "P":
            _require(fields, 3, line_no)
            name = fields[1]
            if name in records.paths:
                msg = f"duplicate path name '{name}'"
                raise GfaFormatError(msg, line_no)
            records.paths[name] = _parse_path_steps(fields[2], line_no)
            path_lines[name] = line_no

        elif kind == "W":
            _require(fields, 7, line_no)
            name = walk_name(*fields[1:6])
            if name in records.paths:
                msg = f"duplicate path name '{name}'"
                raise GfaFormatError(msg, line_no)
            records.paths[name] = _parse_walk_steps(fields[6], line_no)
            path_lines[name] = line_no

    for (a, b), line_no in zip(records.edges, edge_lines, strict=True):
        for handle in (a, b):
            if handle.node_id not in records.sequences:
                msg = f"link references unknown segment {handle.node_id}"
                raise GfaFormatError(msg, line_no)
    for name, handles in records.paths.items():
        for handle in handles:
            if handle.node_id not in records.sequences:
                msg = f"path '{name}' references unknown segment {handle.node_id}"
                raise GfaFormatError(msg, path_lines[name])

    return records


def iter_gfa_lines(
    sequences: Iterable[tuple[int, str]],
    edges: Iterable[tuple[Handle, Handle]],
    paths: Iterable[tuple[str, Iterable[Handle]]],
) -> Iterator[str]:
    """Yield GFA 1.0 lines (without newlines) for the given content."""
    yield "H\tVN:Z:1.0"
    for node_id, seq in sequences:
        yield f"S\t{node_id}\t{seq or '*'}"
    for a, b in edges:
        a_strand = "-" if a.is_reverse else "+"
        b_strand = "-" if b.is_reverse else "+"
        yield f"L\t{a.node_id}\t{a_strand}\t{b.node_id}\t{b_strand}\t0M"
    for name, handles in paths:
        yield f"P\t{name}\t{','.join(str(h) for h in handles)}\t*"


def write_lines(lines: Iterable[str], stream: IO[str]) -> int:
    """Write *lines* to *stream*, newline-terminated. Returns the line count."""
    count = 0
    for line in lines:
        stream.write(line)
        stream.write("\n")
        count += 1
    return count


def write_file(lines: Iterable[str], target: Path) -> int:
    """Write *lines* to *target* through a sibling temporary file.

    *target* is replaced only once every line is written, so a failed write
    leaves any existing file untouched. Returns the line count.

    Raises:
        OSError: The temporary file could not be created, written or moved.
    """
    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", text=True
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as stream:
            count = write_lines(lines, stream)
        tmp_path.replace(target)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
    return count
