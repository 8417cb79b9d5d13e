"""Discover markdown blog posts and order them newest first.

:class:`BlogCatalog` enumerates ``*.md`` files in the content directory,
extracts their front-matter, renders each body to HTML, and returns
:class:`BlogPost` records sorted by date descending. A file that cannot be
read or parsed is logged and skipped so one bad post never hides the rest.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.blog import BlogCatalog
>>> catalog = BlogCatalog(Path("content/blog"))  # doctest: +SKIP
>>> [post.slug for post in catalog.list_posts()]  # doctest: +SKIP
['building-this-site', 'hello-world']
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ
from pathlib import Path

from ._constants import UNTITLED_POST
from .config.helpers import _optional_str, _string_tuple
from .frontmatter import PostExtractionError, split_frontmatter
from .generator.renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BlogPost:
    """A rendered blog post and its front-matter metadata.

    Attributes
    ----------
    slug : str
        Source filename without the ``.md`` extension.
    title : str
        Front-matter title, or ``"Untitled Post"``.
    date : str
        ISO ``YYYY-MM-DD`` publication date; today when the source has none.
    description : str or None
        ``excerpt`` or ``description`` from the front-matter.
    tags : tuple[str, ...]
        Unique tags in source order.
    content : str
        Body rendered to HTML.
    """

    slug: str
    title: str
    date: str
    description: str | None
    tags: tuple[str, ...]
    content: str

    @property
    def published(self) -> dt.date:
        """Return :attr:`date` parsed as a :class:`datetime.date`."""
        return dt.date.fromisoformat(self.date)


class BlogCatalog:
    """Enumerate and render the posts stored in a content directory."""

    def __init__(
        self,
        content_dir: Path,
        *,
        renderer: HtmlContentRenderer | None = None,
        today: typ.Callable[[], dt.date] | None = None,
    ) -> None:
        """Initialize the catalog.

        Parameters
        ----------
        content_dir : Path
            Flat directory holding ``*.md`` post sources.
        renderer : HtmlContentRenderer, optional
            Markdown renderer used for post bodies.
        today : callable, optional
            Returns the date substituted for posts without one. Defaults to
            :meth:`datetime.date.today`.
        """
        self.content_dir = content_dir
        self.renderer = renderer or HtmlContentRenderer()
        self._today = today or dt.date.today

    def list_posts(self) -> list[BlogPost]:
        """Return every readable post, newest first.

        Posts sharing a date keep their filename order. Posts without a date
        sort as if published today.
        """
        if not self.content_dir.is_dir():
            logger.info("No blog content directory at %s", self.content_dir)
            return []
        today = self._today()
        posts: list[BlogPost] = []
        for path in sorted(self.content_dir.glob("*.md")):
            if not path.is_file():
                continue
            try:
                posts.append(self._load_post(path, today))
            except PostExtractionError as exc:
                logger.warning("Skipping blog post %s: %s", path.name, exc)
        return sorted(posts, key=lambda post: post.published, reverse=True)

    def get_post(self, slug: str) -> BlogPost | None:
        """Return the post whose slug equals ``slug``, or ``None``."""
        return next((post for post in self.list_posts() if post.slug == slug), None)

    def _load_post(self, path: Path, today: dt.date) -> BlogPost:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"unreadable source: {exc}"
            raise PostExtractionError(msg) from exc
        metadata, body = split_frontmatter(text)
        return BlogPost(
            slug=path.stem,
            title=_optional_str(metadata.get("title")) or UNTITLED_POST,
            date=_coerce_date(metadata.get("date"), today).isoformat(),
            description=_optional_str(
                metadata.get("excerpt") or metadata.get("description")
            ),
            tags=_string_tuple(metadata.get("tags"), unique=True),
            content=self.renderer.markdown(body),
        )


def _coerce_date(value: object, today: dt.date) -> dt.date:
    """Return the publication date encoded in a front-matter value."""
    match value:
        case None | "":
            return today
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            candidate = text.strip()
            try:
                return dt.datetime.fromisoformat(candidate).date()
            except ValueError as exc:
                msg = f"invalid date {text!r}"
                raise PostExtractionError(msg) from exc
        case _:
            msg = f"invalid date {value!r}"
            raise PostExtractionError(msg)


__all__ = ["BlogCatalog", "BlogPost"]
