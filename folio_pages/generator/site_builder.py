"""Static site rendering pipeline.

:class:`SiteBuilder` is the composition root of a build. It owns the
:class:`~folio_pages.config.ConfigStore` and
:class:`~folio_pages.blog.BlogCatalog`, calls each route loader in
:mod:`folio_pages.routes`, renders the returned data with the route's Jinja
template, and writes the HTML bundle:

- ``index.html`` and ``projects.html``
- ``blog/index.html`` and one ``blog/<slug>.html`` per post
- ``404.html`` and ``assets/codehilite.css``

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from folio_pages.blog import BlogCatalog
>>> from folio_pages.config import ConfigStore
>>> builder = SiteBuilder(
...     ConfigStore(Path(".")), BlogCatalog(Path("content/blog"))
... )  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .._constants import (
    DEFAULT_OUTPUT_DIR,
    POST_NOT_FOUND,
    POST_PAGE_TEMPLATE,
    THEME_STORAGE_KEY,
)
from ..routes import (
    BlogPostData,
    LayoutData,
    load_blog_index,
    load_blog_post,
    load_home,
    load_layout,
    load_projects,
    page_context,
)
from ..theme import ThemeController

if typ.TYPE_CHECKING:
    from ..blog import BlogCatalog
    from ..config import ConfigStore

logger = logging.getLogger(__name__)

CODEHILITE_CSS = "assets/codehilite.css"


class SiteBuilder:
    """Render every route of the portfolio into static HTML files."""

    def __init__(
        self,
        store: ConfigStore,
        catalog: BlogCatalog,
        *,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        store : ConfigStore
            Configuration shared by every page.
        catalog : BlogCatalog
            Source of blog posts for the blog routes.
        output_dir : Path, optional
            Directory receiving the bundle. Defaults to ``public``.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``folio_pages/templates``.
        """
        self.store = store
        self.catalog = catalog
        self.output_dir = output_dir or Path(DEFAULT_OUTPUT_DIR)
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.initial_theme = ThemeController(interactive=False).initialize()

    def run(self) -> list[Path]:
        """Render every page and return the written paths in build order."""
        self.store.initialize()
        layout = load_layout(self.store)
        written = [
            self._write_stylesheet(),
            self._render(
                "home_page.jinja", "index.html", layout, load_home(self.store)
            ),
            self._render(
                "projects_page.jinja",
                "projects.html",
                layout,
                load_projects(self.store),
            ),
        ]
        index = load_blog_index(self.catalog)
        written.append(
            self._render("blog_index.jinja", "blog/index.html", layout, index)
        )
        for post in index.posts:
            written.append(
                self._render(
                    "blog_post.jinja",
                    POST_PAGE_TEMPLATE.format(slug=post.slug),
                    layout,
                    BlogPostData(post=post),
                )
            )
        written.append(self._render_not_found(layout, POST_NOT_FOUND))
        logger.info("Rendered %d files into %s", len(written), self.output_dir)
        return written

    def render_post(self, slug: str) -> Path:
        """Render a single post page.

        Raises
        ------
        PageNotFoundError
            If ``slug`` does not name a post in the catalog.
        """
        data = load_blog_post(self.catalog, slug)
        layout = load_layout(self.store)
        self._write_stylesheet()
        return self._render(
            "blog_post.jinja",
            POST_PAGE_TEMPLATE.format(slug=data.post.slug),
            layout,
            data,
        )

    def _render(
        self, template_name: str, relative_path: str, layout: LayoutData, data: object
    ) -> Path:
        context = {
            **self._base_context(relative_path, layout),
            **page_context(data),
        }
        html = self.env.get_template(template_name).render(**context)
        return self._write(relative_path, html)

    def _render_not_found(self, layout: LayoutData, message: str) -> Path:
        context = {
            **self._base_context("404.html", layout),
            "status": 404,
            "message": message,
        }
        html = self.env.get_template("not_found.jinja").render(**context)
        return self._write("404.html", html)

    def _base_context(
        self, relative_path: str, layout: LayoutData
    ) -> dict[str, typ.Any]:
        """Return values every template needs, including the layout sections."""
        return {
            **page_context(layout),
            "root": "../" * relative_path.count("/"),
            "current_page": relative_path,
            "stylesheet": CODEHILITE_CSS,
            "initial_theme": self.initial_theme.value,
            "theme_storage_key": THEME_STORAGE_KEY,
            "generated_at": dt.datetime.now(dt.UTC),
        }

    def _write_stylesheet(self) -> Path:
        return self._write(CODEHILITE_CSS, self.catalog.renderer.stylesheet)

    def _write(self, relative_path: str, text: str) -> Path:
        output_path = self.output_dir / relative_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if not text.endswith("\n"):
            text += "\n"
        output_path.write_text(text, encoding="utf-8")
        return output_path


__all__ = ["CODEHILITE_CSS", "SiteBuilder"]
