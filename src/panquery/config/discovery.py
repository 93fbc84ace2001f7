"""Locate and read ``panquery.toml``.

The file is found the way git finds ``.git/``: walk up from the working
directory. ``PANQUERY_CONFIG`` names a file directly and disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "panquery.toml"
CONFIG_ENV_VAR = "PANQUERY_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* and anchor a relative ``[graph] path`` at its directory.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    graph = data.get("graph")
    if isinstance(graph, dict) and isinstance(graph.get("path"), str):
        graph_path = Path(graph["path"])
        if not graph_path.is_absolute():
            graph_path = path.parent / graph_path
        data["graph"] = {**graph, "path": graph_path}
    return data
