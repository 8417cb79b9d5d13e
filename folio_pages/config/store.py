"""Process-wide cache of the site and projects configuration.

The :class:`ConfigStore` is created once by the composition root (the CLI or
:class:`~folio_pages.generator.SiteBuilder`) and handed to every page loader.
It reads ``site.toml`` and ``projects.toml`` the first time either is needed
and keeps whatever was produced, a parsed document or the fallback, until
:meth:`ConfigStore.reload` is called.

Examples
--------
>>> from pathlib import Path
>>> store = ConfigStore(Path("."))  # doctest: +SKIP
>>> store.get_site_config()["title"]  # doctest: +SKIP
'Portfolio Website'
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from pathlib import Path

from .._constants import PROJECTS_CONFIG_FILENAME, SITE_CONFIG_FILENAME
from .defaults import default_config
from .loader import (
    build_config_document,
    build_projects,
    read_config_source,
    resolve_config_path,
)
from .models import (
    BuildMode,
    ConfigDocument,
    ConfigLoaded,
    ConfigLoadFailure,
    LoadErrorKind,
    Project,
    Section,
)

logger = logging.getLogger(__name__)


class ConfigStore:
    """Lazily load and cache configuration documents for one site root."""

    def __init__(
        self,
        root: Path,
        *,
        mode: BuildMode = BuildMode.DEVELOPMENT,
        today: dt.date | None = None,
    ) -> None:
        """Initialize the store without touching the filesystem.

        Parameters
        ----------
        root : Path
            Project root containing ``site.toml`` (development) or
            ``static/site.toml`` (production).
        mode : BuildMode, optional
            Selects which of the two locations is read.
        today : datetime.date, optional
            Date used by the fallback document for ``copyright_year``.
        """
        self.root = root
        self.mode = mode
        self.today = today
        self.site_path = resolve_config_path(root, SITE_CONFIG_FILENAME, mode)
        self.projects_path = resolve_config_path(root, PROJECTS_CONFIG_FILENAME, mode)
        self._lock = threading.Lock()
        self._initialized = False
        self._config: ConfigDocument | None = None
        self._projects: tuple[Project, ...] = ()

    def initialize(self) -> None:
        """Load both configuration sources once; later calls do nothing."""
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            self._config = self._load_config()
            self._projects = self._load_projects()
            self._initialized = True

    def reload(self) -> None:
        """Drop cached documents so the next access reads the files again."""
        with self._lock:
            self._initialized = False
            self._config = None
            self._projects = ()

    def get_config(self) -> ConfigDocument:
        """Return the cached configuration document, loading it if needed."""
        self.initialize()
        if self._config is None:  # pragma: no cover - initialize always sets it
            msg = "Configuration store failed to initialize."
            raise RuntimeError(msg)
        return self._config

    def get_projects(self) -> tuple[Project, ...]:
        """Return the cached projects list; empty when no source is usable."""
        self.initialize()
        return self._projects

    def get_site_config(self) -> Section:
        """Return the ``site`` section."""
        return self.get_config().site

    def get_owner_config(self) -> Section:
        """Return the ``owner`` section."""
        return self.get_config().owner

    def get_social_config(self) -> Section:
        """Return the ``social`` section."""
        return self.get_config().social

    def get_skills_config(self) -> Section:
        """Return the ``skills`` section."""
        return self.get_config().skills

    def get_theme_config(self) -> Section:
        """Return the ``theme`` section."""
        return self.get_config().theme

    def get_navigation_config(self) -> Section:
        """Return the ``navigation`` section."""
        return self.get_config().navigation

    def get_features_config(self) -> Section:
        """Return the ``features`` section."""
        return self.get_config().features

    def get_seo_config(self) -> Section:
        """Return the ``seo`` section."""
        return self.get_config().seo

    def get_contact_config(self) -> Section:
        """Return the ``contact`` section."""
        return self.get_config().contact

    def _load_config(self) -> ConfigDocument:
        defaults = default_config(today=self.today)
        match read_config_source(self.site_path):
            case ConfigLoaded() as loaded:
                result = build_config_document(loaded, defaults)
            case ConfigLoadFailure() as failure:
                result = failure
        match result:
            case ConfigDocument():
                logger.debug("Loaded site configuration from %s", self.site_path)
                return result
            case ConfigLoadFailure(kind=kind, detail=detail):
                logger.warning(
                    "Using default site configuration; %s is %s: %s",
                    self.site_path,
                    kind.value,
                    detail,
                )
        return defaults

    def _load_projects(self) -> tuple[Project, ...]:
        match read_config_source(self.projects_path):
            case ConfigLoaded() as loaded:
                result = build_projects(loaded)
            case ConfigLoadFailure() as failure:
                result = failure
        match result:
            case tuple():
                logger.debug(
                    "Loaded %d projects from %s", len(result), self.projects_path
                )
                return result
            case ConfigLoadFailure(kind=LoadErrorKind.NOT_FOUND):
                logger.info("No projects file at %s", self.projects_path)
            case ConfigLoadFailure(kind=kind, detail=detail):
                logger.warning(
                    "Ignoring projects configuration; %s is %s: %s",
                    self.projects_path,
                    kind.value,
                    detail,
                )
        return ()


__all__ = ["ConfigStore"]
