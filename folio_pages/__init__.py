"""Static portfolio and blog site generator.

This package exposes the CLI entry points used by the ``folio`` console
script to render the home, projects, and blog pages from ``site.toml``,
``projects.toml`` and markdown posts.

Exports
-------
- ``app``: Cyclopts application holding the subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
