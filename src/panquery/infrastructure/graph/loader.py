"""Graph loader — GFA resource in, immutable VariationGraph out.

Loading is all-or-nothing: either a fully built graph is returned or
:class:`GraphLoadError` is raised. The graph is read with a single
blocking pass over the file.
"""

from __future__ import annotations

import logging
import time
import zlib
from pathlib import Path

from panquery.infrastructure.graph.gfa import GfaFormatError, open_text, parse_gfa
from panquery.infrastructure.graph.store import VariationGraph

logger = logging.getLogger(__name__)

UNREADABLE = "UNREADABLE"
MALFORMED = "MALFORMED"


class GraphLoadError(Exception):
    """The graph resource could not be opened or deserialized.

    Attributes:
        code: ``UNREADABLE`` (missing, unreadable, truncated or corrupt
            gzip resource) or ``MALFORMED`` (resource read but content
            invalid).
        path: The resource that failed to load.
        line_no: Offending line for ``MALFORMED`` content, when known.
    """

    def __init__(self, code: str, path: Path, message: str, line_no: int | None = None) -> None:
        self.code = code
        self.path = path
        self.line_no = line_no
        super().__init__(f"Failed to load graph from '{path}': {message}")


def load_graph(path: str | Path) -> VariationGraph:
    """Load a GFA (optionally gzipped) file into a :class:`VariationGraph`.

    Raises:
        GraphLoadError: If the file cannot be read or its content is invalid.
    """
    source = Path(path)
    logger.debug("Loading graph from %s", source)
    started = time.perf_counter()

    try:
        stream = open_text(source)
    except (OSError, ValueError) as exc:
        raise GraphLoadError(UNREADABLE, source, str(exc) or type(exc).__name__) from exc

    try:
        with stream:
            records = parse_gfa(stream)
    except GfaFormatError as exc:
        raise GraphLoadError(MALFORMED, source, str(exc), exc.line_no) from exc
    except UnicodeDecodeError as exc:
        raise GraphLoadError(MALFORMED, source, f"not UTF-8 text ({exc.reason})") from exc
    except zlib.error as exc:
        raise GraphLoadError(UNREADABLE, source, f"corrupt gzip data ({exc})") from exc
    except (OSError, EOFError) as exc:
        raise GraphLoadError(UNREADABLE, source, str(exc) or type(exc).__name__) from exc

    graph = VariationGraph(records.sequences, records.edges, records.paths)
    logger.info(
        "Loaded graph %s: %d nodes, %d edges, %d paths, %d warnings in %.2f ms",
        source,
        graph.node_count(),
        graph.edge_count(),
        graph.path_count(),
        len(records.warnings),
        (time.perf_counter() - started) * 1000,
    )
    return graph
