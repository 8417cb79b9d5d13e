"""Read TOML configuration sources into typed results and dataclasses."""

from __future__ import annotations

import logging
import tomllib
import typing as typ
from pathlib import Path

from .._constants import STATIC_DIRNAME
from .helpers import _freeze_section, _optional_str, _string_tuple
from .models import (
    SECTION_NAMES,
    BuildMode,
    ConfigDocument,
    ConfigLoaded,
    ConfigLoadFailure,
    LoadErrorKind,
    LoadResult,
    Project,
)

logger = logging.getLogger(__name__)


def resolve_config_path(root: Path, filename: str, mode: BuildMode) -> Path:
    """Return the location of ``filename`` for the given build mode.

    Development builds read from the project root; production builds read the
    copy published alongside the static assets.

    Examples
    --------
    >>> from pathlib import Path
    >>> resolve_config_path(Path("site"), "site.toml", BuildMode.PRODUCTION)
    PosixPath('site/static/site.toml')
    """
    match mode:
        case BuildMode.PRODUCTION:
            return root / STATIC_DIRNAME / filename
        case _:
            return root / filename


def read_config_source(path: Path) -> LoadResult:
    """Read and parse a TOML file without raising.

    Parameters
    ----------
    path : Path
        Filesystem path of the TOML document.

    Returns
    -------
    ConfigLoaded or ConfigLoadFailure
        The parsed top-level table, or a failure carrying the
        :class:`LoadErrorKind` and a human-readable detail.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ConfigLoadFailure(path, LoadErrorKind.NOT_FOUND, "file does not exist")
    except PermissionError as exc:
        return ConfigLoadFailure(path, LoadErrorKind.PERMISSION_DENIED, str(exc))
    except (OSError, UnicodeDecodeError) as exc:
        return ConfigLoadFailure(path, LoadErrorKind.UNREADABLE, str(exc))
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        return ConfigLoadFailure(path, LoadErrorKind.MALFORMED, str(exc))
    return ConfigLoaded(path, data)


def build_config_document(
    loaded: ConfigLoaded, defaults: ConfigDocument
) -> ConfigDocument | ConfigLoadFailure:
    """Validate a parsed ``site.toml`` and combine it with the defaults.

    A section present in the file replaces the default section as a whole.
    Sections the file does not mention keep their default value, so the
    returned document never lacks a section.
    """
    sections: dict[str, typ.Any] = {}
    for name in SECTION_NAMES:
        match loaded.data.get(name):
            case None:
                sections[name] = defaults.section(name)
            case dict() as payload:
                sections[name] = _freeze_section(payload)
            case other:
                detail = (
                    f"section '{name}' must be a table, got {type(other).__name__}"
                )
                return ConfigLoadFailure(loaded.path, LoadErrorKind.INVALID, detail)
    unknown = sorted(set(loaded.data) - set(SECTION_NAMES))
    if unknown:
        logger.debug("Ignoring unknown sections in %s: %s", loaded.path, unknown)
    return ConfigDocument(**sections, source=loaded.path)


def build_projects(loaded: ConfigLoaded) -> tuple[Project, ...] | ConfigLoadFailure:
    """Convert the ``[[projects]]`` array of a parsed ``projects.toml``."""
    match loaded.data.get("projects"):
        case None:
            return ()
        case list() as entries:
            pass
        case other:
            detail = f"'projects' must be an array of tables, got {type(other).__name__}"
            return ConfigLoadFailure(loaded.path, LoadErrorKind.INVALID, detail)

    projects: list[Project] = []
    for index, entry in enumerate(entries):
        match entry:
            case {"name": name, **rest} if _optional_str(name):
                pass
            case _:
                logger.warning(
                    "Skipping project #%d in %s: expected a table with a 'name'.",
                    index,
                    loaded.path,
                )
                continue
        projects.append(
            Project(
                name=str(name).strip(),
                description=_optional_str(rest.get("description")) or "",
                category=_optional_str(rest.get("category")) or "",
                icon=_optional_str(rest.get("icon")) or "",
                link=_optional_str(rest.get("link")) or "",
                technologies=_string_tuple(rest.get("technologies"), unique=True),
                highlights=_string_tuple(rest.get("highlights")),
            )
        )
    return tuple(projects)


__all__ = [
    "build_config_document",
    "build_projects",
    "read_config_source",
    "resolve_config_path",
]
