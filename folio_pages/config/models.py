"""Typed dataclasses describing portfolio site configuration structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

SECTION_NAMES: tuple[str, ...] = (
    "site",
    "owner",
    "social",
    "skills",
    "theme",
    "navigation",
    "features",
    "seo",
    "contact",
)

Section = typ.Mapping[str, typ.Any]


class ConfigError(ValueError):
    """Raised when a configuration operation cannot be completed."""


class BuildMode(enum.StrEnum):
    """Deployment mode deciding where configuration files are read from."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LoadErrorKind(enum.StrEnum):
    """Reason a configuration source could not be used."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    UNREADABLE = "unreadable"
    MALFORMED = "malformed"
    INVALID = "invalid"


@dc.dataclass(frozen=True, slots=True)
class ConfigDocument:
    """Parsed site configuration; every section is always present.

    Sections are read-only mappings. A section supplied by the source file
    replaces the default section as a whole; sections missing from the file
    are taken from the defaults.
    """

    site: Section
    owner: Section
    social: Section
    skills: Section
    theme: Section
    navigation: Section
    features: Section
    seo: Section
    contact: Section
    source: Path | None = None

    def section(self, name: str) -> Section:
        """Return the section called ``name``."""
        if name not in SECTION_NAMES:
            msg = f"Unknown configuration section '{name}'."
            raise KeyError(msg)
        return getattr(self, name)

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the sections as plain nested dictionaries."""
        return {name: _thaw(self.section(name)) for name in SECTION_NAMES}


@dc.dataclass(frozen=True, slots=True)
class Project:
    """Portfolio project entry sourced from ``projects.toml``."""

    name: str
    description: str = ""
    category: str = ""
    icon: str = ""
    link: str = ""
    technologies: tuple[str, ...] = ()
    highlights: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ConfigLoaded:
    """Successful read of a configuration source."""

    path: Path
    data: dict[str, typ.Any]


@dc.dataclass(frozen=True, slots=True)
class ConfigLoadFailure:
    """Failed read of a configuration source."""

    path: Path
    kind: LoadErrorKind
    detail: str


LoadResult = ConfigLoaded | ConfigLoadFailure


def _thaw(value: typ.Any) -> typ.Any:  # noqa: ANN401 - config values are heterogeneous
    match value:
        case cabc.Mapping():
            return {key: _thaw(item) for key, item in value.items()}
        case tuple() | list():
            return [_thaw(item) for item in value]
        case _:
            return value


__all__ = [
    "SECTION_NAMES",
    "BuildMode",
    "ConfigDocument",
    "ConfigError",
    "ConfigLoadFailure",
    "ConfigLoaded",
    "LoadErrorKind",
    "LoadResult",
    "Project",
    "Section",
]
