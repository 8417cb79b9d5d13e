"""Cyclopts CLI entrypoint for building the portfolio site.

The ``folio`` console script defined here renders the static site from
``site.toml``, ``projects.toml`` and the markdown posts under
``content/blog``, lists the discovered posts, prints the resolved
configuration, and scaffolds a starter ``site.toml``. Every option can also be
supplied through a ``FOLIO_`` environment variable (``FOLIO_MODE`` selects
between development and production configuration paths).

Examples
--------
Build the whole site into ``public/``:

>>> from folio_pages.cli import main
>>> main()  # doctest: +SKIP

Render a single post from the production configuration:

>>> from folio_pages.cli import app
>>> app(["build", "--post", "hello-world", "--mode", "production"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONTENT_DIR, DEFAULT_OUTPUT_DIR, SITE_CONFIG_FILENAME
from ._logging import configure_logging
from .blog import BlogCatalog
from .config import BuildMode, ConfigError, ConfigStore, write_starter_config
from .generator import SiteBuilder
from .routes import PageNotFoundError

app = App(name="folio", config=cyclopts.config.Env("FOLIO_", command=False))  # type: ignore[unknown-argument]

RootOption = typ.Annotated[Path, Parameter(help="Project root holding site.toml")]
ModeOption = typ.Annotated[
    BuildMode,
    Parameter(help="Read configuration from the root or from static/"),
]
ContentOption = typ.Annotated[
    Path | None,
    Parameter(help="Directory of markdown posts (default: <root>/content/blog)"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(message: str) -> typ.NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(1)


@app.command(help="Render the portfolio and blog into static HTML.")
def build(
    *,
    root: RootOption = Path(),
    content_dir: ContentOption = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Output folder (default: <root>/public)")
    ] = None,
    mode: ModeOption = BuildMode.DEVELOPMENT,
    post: typ.Annotated[
        str | None, Parameter(help="Render only the post with this slug")
    ] = None,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Build the static site.

    Parameters
    ----------
    root : Path, optional
        Project root; defaults to the current directory.
    content_dir : Path or None, optional
        Markdown post directory; defaults to ``<root>/content/blog``.
    output_dir : Path or None, optional
        Destination folder; defaults to ``<root>/public``.
    mode : BuildMode, optional
        ``development`` reads ``<root>/site.toml``; ``production`` reads
        ``<root>/static/site.toml``.
    post : str or None, optional
        Render only this post. Exits with status 1 when it does not exist.
    verbose : bool, optional
        Log debug output from the build.
    log_json : bool, optional
        Emit logs as JSON lines.
    """
    configure_logging(verbose=verbose, log_json=log_json)
    store = ConfigStore(root, mode=mode)
    catalog = BlogCatalog(content_dir or root / DEFAULT_CONTENT_DIR)
    builder = SiteBuilder(
        store, catalog, output_dir=output_dir or root / DEFAULT_OUTPUT_DIR
    )
    if post is not None:
        try:
            written = [builder.render_post(post)]
        except PageNotFoundError as exc:
            _fail(f"{exc.message} ({exc.status}): {post}")
    else:
        written = builder.run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="List blog posts, newest first.")
def posts(
    *,
    root: RootOption = Path(),
    content_dir: ContentOption = None,
) -> None:
    """Print one ``date  slug  title`` line per discovered post."""
    catalog = BlogCatalog(content_dir or root / DEFAULT_CONTENT_DIR)
    for entry in catalog.list_posts():
        print(f"{entry.date}  {entry.slug}  {entry.title}")


@app.command(help="Print the resolved site configuration as JSON.")
def config(
    *,
    root: RootOption = Path(),
    mode: ModeOption = BuildMode.DEVELOPMENT,
) -> None:
    """Print the configuration document that a build would use."""
    document = ConfigStore(root, mode=mode).get_config()
    payload = {
        "source": str(document.source) if document.source else None,
        **document.as_dict(),
    }
    print(msgspec.json.format(msgspec.json.encode(payload), indent=2).decode())


@app.command(help="Write a starter site.toml populated with the defaults.")
def init(
    *,
    root: RootOption = Path(),
    force: typ.Annotated[
        bool, Parameter(help="Overwrite an existing site.toml")
    ] = False,
) -> None:
    """Scaffold ``<root>/site.toml``."""
    try:
        path = write_starter_config(root / SITE_CONFIG_FILENAME, force=force)
    except ConfigError as exc:
        _fail(str(exc))
    print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
