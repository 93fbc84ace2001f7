"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, panquery.toml only contains
overrides. A typical file is just::

    [graph]
    path = "pangenome.gfa.gz"
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    path: Path | None = None
