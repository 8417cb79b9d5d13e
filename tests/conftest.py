"""Shared fixtures for folio_pages tests."""

from __future__ import annotations

import datetime as dt
import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

FIXED_TODAY = dt.date(2024, 6, 1)

WritePost = typ.Callable[..., "Path"]


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Return an empty blog content directory."""
    path = tmp_path / "content" / "blog"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_post(content_dir: Path) -> WritePost:
    """Return a helper writing ``<slug>.md`` with optional front-matter."""

    def _write(
        slug: str,
        body: str = "Body text.\n",
        **metadata: object,
    ) -> Path:
        lines = ["---"]
        for key, value in metadata.items():
            match value:
                case list():
                    lines.append(f"{key}: [{', '.join(str(v) for v in value)}]")
                case _:
                    lines.append(f"{key}: {value}")
        lines.append("---")
        path = content_dir / f"{slug}.md"
        path.write_text("\n".join(lines) + "\n" + dedent(body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def site_toml(tmp_path: Path) -> typ.Callable[[str], Path]:
    """Return a helper writing ``site.toml`` into the temporary root."""

    def _write(text: str) -> Path:
        path = tmp_path / "site.toml"
        path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
        return path

    return _write
