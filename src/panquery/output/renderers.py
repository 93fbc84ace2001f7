"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from panquery.output.console import create_console, get_output, style_for_strand

if TYPE_CHECKING:
    from rich.console import Console

    from panquery.services.result import ServiceResult

type _Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    if verbose and result.meta and "telemetry" in result.meta:
        _render_telemetry(result.meta["telemetry"], console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values for ``--quiet`` mode (one per line for lists)."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    data = result.data
    match result.op:
        case "sequence":
            return str(data["sequence"])
        case "length":
            return str(data["length"])
        case "project":
            strand = "+" if data["is_forward"] else "-"
            return f"{data['node_id']}\t{data['node_offset']}\t{strand}"
        case "next_node":
            return str(data["next_node_id"])
        case "successors" | "predecessors":
            return "\n".join(item["edge"] for item in data["items"])
        case "paths_on_node" | "paths_on_edge":
            return "\n".join(data["items"])
        case "list_paths":
            return "\n".join(item["name"] for item in data["items"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pq.ok"), Text(f"  {result.op}", style="pq.op"))


def _kv(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="pq.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console) -> None:
    label = Text("ERROR", style="pq.error")
    op = Text(f"  {result.op}", style="pq.op")
    message = result.error.message if result.error else "Unknown error"
    console.print(label, op)
    console.print(f"  {message}")
    if result.error and result.error.code:
        _kv(console, "code", result.error.code)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _kv(console, key, value)


def _render_sequence(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    strand_style = style_for_strand(data["strand"] == "+")
    console.print(
        Text(f"  node {data['node_id']}", style="pq.node"),
        Text(data["strand"], style=strand_style),
        Text(f"  ({data['length']} bp)", style="pq.key"),
        sep="",
    )
    console.print(Text(f"  {data['sequence']}", style="pq.seq"), soft_wrap=True)


def _strand_text(is_forward: bool) -> Text:
    return Text("+" if is_forward else "-", style=style_for_strand(is_forward))


def _render_edges(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("EDGE")
    table.add_column("NEIGHBOR", justify="right")
    table.add_column("FROM")
    table.add_column("TO")
    for item in data["items"]:
        table.add_row(
            item["edge"],
            Text(str(item["node_id"]), style="pq.node"),
            _strand_text(item["from_forward"]),
            _strand_text(item["to_forward"]),
        )
    console.print(table)
    _kv(console, "count", data["count"])


def _render_names(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    for name in data["items"]:
        console.print(Text(f"  {name}", style="pq.path"))
    _kv(console, "count", data["count"])


def _render_path_list(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("PATH")
    table.add_column("STEPS", justify="right")
    table.add_column("LENGTH", justify="right")
    for item in data["items"]:
        table.add_row(Text(item["name"], style="pq.path"), str(item["steps"]), str(item["length"]))
    console.print(table)
    _kv(console, "count", data["count"])


def _render_projection(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    strand = "+" if data["is_forward"] else "-"
    console.print(
        Text(f"  {data['path']}:{data['offset']}", style="pq.path"),
        Text(" -> ", style="pq.key"),
        Text(f"node {data['node_id']}", style="pq.node"),
        Text(strand, style=style_for_strand(data["is_forward"])),
        Text(f" offset {data['node_offset']}"),
        sep="",
    )


def _render_telemetry(telemetry: dict[str, Any], console: Console, depth: int = 1) -> None:
    indent = "  " * depth
    console.print(
        Text(f"{indent}{telemetry['name']}", style="pq.key"),
        Text(f"  {telemetry['duration_ms']} ms", style="pq.key"),
        sep="",
    )
    for child in telemetry.get("children", []):
        _render_telemetry(child, console, depth + 1)


_OP_RENDERERS: dict[str, _Renderer] = {
    "sequence": _render_sequence,
    "successors": _render_edges,
    "predecessors": _render_edges,
    "paths_on_node": _render_names,
    "paths_on_edge": _render_names,
    "list_paths": _render_path_list,
    "project": _render_projection,
}
