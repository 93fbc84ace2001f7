"""Layered settings for one panquery invocation.

Sources, highest priority first:

1. CLI flags (``--graph``, ``--json``, ...)
2. ``PANQUERY_*`` environment variables, nested with ``__``
   (``PANQUERY_GRAPH__PATH=/data/pangenome.gfa.gz``)
3. ``panquery.toml`` found by :func:`~panquery.config.discovery.find_config`
4. defaults on the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from panquery.config.discovery import find_config, read_config_data
from panquery.config.models import GraphConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a ``panquery.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = read_config_data(toml_path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources inside __init__, so the file chosen by
# from_cli() is handed over per thread.
_pending = threading.local()


class PanquerySettings(BaseSettings):
    """Frozen settings object stored on the Click context.

    Attributes:
        config_path: The ``panquery.toml`` in effect, or None.
        graph: ``[graph]`` section. ``graph.path`` is the resource every
            query command reads.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PANQUERY_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    graph: GraphConfig = Field(default_factory=GraphConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        graph_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PanquerySettings:
        """Build settings for a CLI invocation.

        An explicit *config_path* skips discovery; otherwise the walk starts
        at *start* (default: cwd). *graph_path* replaces ``[graph] path``.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        overrides: dict[str, Any] = dict(cli_flags)
        if graph_path:
            overrides["graph"] = GraphConfig(path=Path(graph_path))

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _pending.toml_path = None
