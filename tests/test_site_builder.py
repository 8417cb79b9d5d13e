"""End-to-end tests for rendering the static site bundle.

These tests build a small site from a temporary ``site.toml``,
``projects.toml`` and a pair of markdown posts, then inspect the written
HTML with BeautifulSoup. They cover the files written by
:meth:`SiteBuilder.run`, navigation and theme markup driven by the layout
sections, per-route content, and single-post rendering through
:meth:`SiteBuilder.render_post`.

Usage
-----
Run ``pytest tests/test_site_builder.py -v``.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest
from bs4 import BeautifulSoup

from folio_pages.blog import BlogCatalog
from folio_pages.config import ConfigStore
from folio_pages.generator import SiteBuilder
from folio_pages.routes import PageNotFoundError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .conftest import WritePost


@pytest.fixture
def builder(
    tmp_path: Path,
    content_dir: Path,
    write_post: WritePost,
    site_toml: cabc.Callable[[str], Path],
) -> SiteBuilder:
    """Build a SiteBuilder over a small temporary site."""
    site_toml(
        """
        [site]
        title = "Ada Builds"
        tagline = "Engineer"
        language = "en"
        copyright_year = 2024

        [owner]
        name = "Ada"
        profession = "Engineer"
        email = "ada@example.com"

        [skills]
        programming = [{ name = "Python", level = "Expert", icon = "🐍" }]
        certifications = [{ name = "Cert", description = "Certified" }]

        [navigation]
        show_home = true
        show_projects = true
        show_blog = true
        show_contact = true

        [social]
        github = "https://github.com/ada"
        twitter = ""
        """
    )
    (tmp_path / "projects.toml").write_text(
        "\n".join(
            [
                "[[projects]]",
                'name = "Engine"',
                'description = "Analytical"',
                'technologies = ["Python"]',
                'highlights = ["Fast"]',
                'link = "https://example.com/engine"',
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    write_post("first", title="First <Post>", date="2024-01-01", tags=["intro"])
    write_post(
        "second",
        body="```rust\nfn main() {}\n```\n",
        title="Second",
        date="2024-02-01",
    )
    return SiteBuilder(
        ConfigStore(tmp_path),
        BlogCatalog(content_dir, today=lambda: dt.date(2024, 6, 1)),
        output_dir=tmp_path / "public",
    )


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_run_writes_every_route(builder: SiteBuilder, tmp_path: Path) -> None:
    written = builder.run()
    out = tmp_path / "public"
    assert [path.relative_to(out).as_posix() for path in written] == [
        "assets/codehilite.css",
        "index.html",
        "projects.html",
        "blog/index.html",
        "blog/second.html",
        "blog/first.html",
        "404.html",
    ]
    assert all(path.read_text(encoding="utf-8").endswith("\n") for path in written)
    assert ".codehilite" in (out / "assets" / "codehilite.css").read_text(
        encoding="utf-8"
    )


def test_home_page_renders_owner_skills_and_navigation(
    builder: SiteBuilder, tmp_path: Path
) -> None:
    builder.run()
    soup = _soup(tmp_path / "public" / "index.html")
    assert soup.title is not None
    assert soup.title.get_text() == "Ada Builds"
    assert soup.select_one(".hero h1").get_text() == "Ada"
    groups = [node["data-group"] for node in soup.select(".skill-group")]
    assert groups == ["programming", "certifications"]
    nav = [link.get_text() for link in soup.select(".site-nav a")]
    assert nav == ["Home", "Projects", "Blog", "Contact"]
    social = [link["href"] for link in soup.select(".social-links a")]
    assert social == ["https://github.com/ada"]
    html = soup.find("html")
    assert html is not None
    assert "dark" not in (html.get("class") or []), "server render starts light"
    script = soup.select_one("script[data-theme-key]")
    assert script is not None
    assert script["data-theme-key"] == "theme"


def test_projects_page_lists_projects(builder: SiteBuilder, tmp_path: Path) -> None:
    builder.run()
    soup = _soup(tmp_path / "public" / "projects.html")
    (project,) = soup.select(".project")
    assert project.select_one("h2").get_text(strip=True) == "Engine"
    assert [li.get_text() for li in project.select(".highlights li")] == ["Fast"]
    assert project.select_one(".project-link")["href"] == "https://example.com/engine"


def test_blog_pages_link_and_escape(builder: SiteBuilder, tmp_path: Path) -> None:
    builder.run()
    index = _soup(tmp_path / "public" / "blog" / "index.html")
    links = [a["href"] for a in index.select(".post-summary h2 a")]
    assert links == ["second.html", "first.html"]
    assert index.select_one('link[rel="stylesheet"]')["href"] == (
        "../assets/codehilite.css"
    )

    first = _soup(tmp_path / "public" / "blog" / "first.html")
    assert first.select_one(".post h1").get_text() == "First <Post>"
    assert first.select_one(".post time")["datetime"] == "2024-01-01"

    second = _soup(tmp_path / "public" / "blog" / "second.html")
    block = second.select_one(".post-body .codehilite")
    assert block is not None
    assert block["data-language"] == "rust"


def test_not_found_page(builder: SiteBuilder, tmp_path: Path) -> None:
    builder.run()
    soup = _soup(tmp_path / "public" / "404.html")
    assert soup.select_one(".not-found h1").get_text() == "404"
    assert soup.select_one(".not-found .message").get_text() == "Post not found"


def test_render_post_writes_single_page(builder: SiteBuilder, tmp_path: Path) -> None:
    path = builder.render_post("first")
    assert path == tmp_path / "public" / "blog" / "first.html"
    assert not (tmp_path / "public" / "index.html").exists()


def test_render_post_rejects_unknown_slug(
    builder: SiteBuilder, tmp_path: Path
) -> None:
    with pytest.raises(PageNotFoundError):
        builder.render_post("../../etc/passwd")
    assert not (tmp_path / "public" / "blog").exists()


def test_defaults_render_without_config_files(
    tmp_path: Path, content_dir: Path
) -> None:
    """A root without site.toml still produces every page."""
    builder = SiteBuilder(
        ConfigStore(tmp_path),
        BlogCatalog(content_dir),
        output_dir=tmp_path / "out",
    )
    written = builder.run()
    assert [path.name for path in written] == [
        "codehilite.css",
        "index.html",
        "projects.html",
        "index.html",
        "404.html",
    ]
    soup = _soup(tmp_path / "out" / "projects.html")
    assert soup.select_one(".empty").get_text() == "No projects yet."


def test_blog_index_encodes_slug_links(
    builder: SiteBuilder, write_post: WritePost, tmp_path: Path
) -> None:
    write_post("notes #1", title="Notes", date="2024-03-01")
    builder.run()
    index = _soup(tmp_path / "public" / "blog" / "index.html")
    links = [a["href"] for a in index.select(".post-summary h2 a")]
    assert links[0] == "notes%20%231.html"
    assert (tmp_path / "public" / "blog" / "notes #1.html").exists()
