"""Page data loaders, one per site route.

Each loader reads the configuration slices or blog posts its template needs
and returns a frozen dataclass. Loaders perform no I/O of their own; they
delegate to :class:`~folio_pages.config.ConfigStore` and
:class:`~folio_pages.blog.BlogCatalog`.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import POST_NOT_FOUND

if typ.TYPE_CHECKING:
    from .blog import BlogCatalog, BlogPost
    from .config import ConfigStore, Project, Section


class PageNotFoundError(LookupError):
    """Raised when a route parameter does not match any content."""

    def __init__(self, message: str, *, status: int = 404) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


@dc.dataclass(frozen=True, slots=True)
class LayoutData:
    """Values shared by every page: header, navigation, footer, theme."""

    site: Section
    owner: Section
    social: Section
    navigation: Section
    features: Section
    theme: Section
    seo: Section


@dc.dataclass(frozen=True, slots=True)
class HomePageData:
    site: Section
    owner: Section
    skills: Section


@dc.dataclass(frozen=True, slots=True)
class ProjectsPageData:
    site: Section
    owner: Section
    projects: tuple[Project, ...]


@dc.dataclass(frozen=True, slots=True)
class BlogIndexData:
    posts: tuple[BlogPost, ...]


@dc.dataclass(frozen=True, slots=True)
class BlogPostData:
    post: BlogPost


def page_context(data: object) -> dict[str, typ.Any]:
    """Return the fields of a page dataclass as template keyword arguments."""
    return {field.name: getattr(data, field.name) for field in dc.fields(data)}


def load_layout(store: ConfigStore) -> LayoutData:
    """Return the shared layout data."""
    config = store.get_config()
    return LayoutData(
        site=config.site,
        owner=config.owner,
        social=config.social,
        navigation=config.navigation,
        features=config.features,
        theme=config.theme,
        seo=config.seo,
    )


def load_home(store: ConfigStore) -> HomePageData:
    """Return the data for the home page."""
    return HomePageData(
        site=store.get_site_config(),
        owner=store.get_owner_config(),
        skills=store.get_skills_config(),
    )


def load_projects(store: ConfigStore) -> ProjectsPageData:
    """Return the data for the projects page."""
    return ProjectsPageData(
        site=store.get_site_config(),
        owner=store.get_owner_config(),
        projects=store.get_projects(),
    )


def load_blog_index(catalog: BlogCatalog) -> BlogIndexData:
    """Return every post, newest first."""
    return BlogIndexData(posts=tuple(catalog.list_posts()))


def load_blog_post(catalog: BlogCatalog, slug: str) -> BlogPostData:
    """Return the post matching ``slug``.

    ``slug`` is untrusted route input and is only compared against the slugs
    the catalog discovered itself.

    Raises
    ------
    PageNotFoundError
        If no post has that slug; ``status`` is 404.
    """
    post = catalog.get_post(slug)
    if post is None:
        raise PageNotFoundError(POST_NOT_FOUND, status=404)
    return BlogPostData(post=post)


__all__ = [
    "BlogIndexData",
    "BlogPostData",
    "HomePageData",
    "LayoutData",
    "PageNotFoundError",
    "ProjectsPageData",
    "load_blog_index",
    "load_blog_post",
    "load_home",
    "load_layout",
    "load_projects",
    "page_context",
]
