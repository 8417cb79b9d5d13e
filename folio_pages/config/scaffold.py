"""Write a starter ``site.toml`` populated from the built-in defaults."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

import tomlkit

from .defaults import default_config
from .models import SECTION_NAMES, ConfigError


def render_starter_config(*, today: dt.date | None = None) -> str:
    """Return the default configuration serialized as commented TOML."""
    document = default_config(today=today).as_dict()
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Site configuration for folio-pages."))
    doc.add(tomlkit.comment("Each table replaces the matching default section."))
    for name in SECTION_NAMES:
        table = tomlkit.table()
        payload: dict[str, typ.Any] = document[name]
        for key, value in payload.items():
            table[key] = value
        doc.add(tomlkit.nl())
        doc[name] = table
    return tomlkit.dumps(doc)


def write_starter_config(
    path: Path, *, force: bool = False, today: dt.date | None = None
) -> Path:
    """Write a starter ``site.toml`` to ``path``.

    Raises
    ------
    ConfigError
        If ``path`` already exists and ``force`` is not set.
    """
    if path.exists() and not force:
        msg = f"Refusing to overwrite existing configuration '{path}'."
        raise ConfigError(msg)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_starter_config(today=today), encoding="utf-8")
    return path


__all__ = ["render_starter_config", "write_starter_config"]
