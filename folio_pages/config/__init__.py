"""Load and cache portfolio site configuration.

This subpackage reads ``site.toml`` and ``projects.toml``, validates them
against the section schema, falls back to :func:`default_config` whenever a
source cannot be used, and exposes the result through :class:`ConfigStore`.
Reads return typed results (:class:`ConfigLoaded` / :class:`ConfigLoadFailure`)
so the store matches on the outcome rather than catching broadly.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import BuildMode, ConfigStore
>>> store = ConfigStore(Path("."), mode=BuildMode.DEVELOPMENT)  # doctest: +SKIP
>>> store.get_owner_config()["name"]  # doctest: +SKIP
'Your Name'
"""

from .defaults import default_config
from .loader import (
    build_config_document,
    build_projects,
    read_config_source,
    resolve_config_path,
)
from .models import (
    SECTION_NAMES,
    BuildMode,
    ConfigDocument,
    ConfigError,
    ConfigLoaded,
    ConfigLoadFailure,
    LoadErrorKind,
    LoadResult,
    Project,
    Section,
)
from .scaffold import render_starter_config, write_starter_config
from .store import ConfigStore

__all__ = [
    "SECTION_NAMES",
    "BuildMode",
    "ConfigDocument",
    "ConfigError",
    "ConfigLoadFailure",
    "ConfigLoaded",
    "ConfigStore",
    "LoadErrorKind",
    "LoadResult",
    "Project",
    "Section",
    "build_config_document",
    "build_projects",
    "default_config",
    "read_config_source",
    "render_starter_config",
    "resolve_config_path",
    "write_starter_config",
]
