from __future__ import annotations

import datetime as dt
import logging
import tomllib
from pathlib import Path

import msgspec.json
import pytest

from folio_pages import cli
from folio_pages.config import SECTION_NAMES, render_starter_config


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI from replacing pytest's log handlers."""
    monkeypatch.setattr(cli, "configure_logging", lambda **_kwargs: None)


def _write_site(root: Path) -> None:
    (root / "site.toml").write_text('[site]\ntitle = "CLI Site"\n', encoding="utf-8")
    posts = root / "content" / "blog"
    posts.mkdir(parents=True)
    (posts / "hello.md").write_text(
        "---\ntitle: Hello\ndate: 2024-01-01\n---\nHi.\n", encoding="utf-8"
    )
    (posts / "later.md").write_text(
        "---\ntitle: Later\ndate: 2024-05-01\n---\nLater.\n", encoding="utf-8"
    )


def test_build_writes_bundle(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_site(tmp_path)
    cli.build(root=tmp_path)
    out = capsys.readouterr().out
    assert (tmp_path / "public" / "index.html").exists()
    assert (tmp_path / "public" / "blog" / "hello.html").exists()
    assert out.count("wrote ") == 7


def test_build_single_post(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_site(tmp_path)
    output_dir = tmp_path / "dist"
    cli.build(root=tmp_path, output_dir=output_dir, post="later")
    assert capsys.readouterr().out.strip().endswith("later.html")
    assert (output_dir / "blog" / "later.html").exists()
    assert not (output_dir / "blog" / "hello.html").exists()


def test_build_unknown_post_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_site(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        cli.build(root=tmp_path, post="missing")
    assert excinfo.value.code == 1
    assert "Post not found (404): missing" in capsys.readouterr().err


def test_posts_lists_newest_first(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_site(tmp_path)
    cli.posts(root=tmp_path)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["2024-05-01  later  Later", "2024-01-01  hello  Hello"]


def test_config_prints_resolved_document(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_site(tmp_path)
    cli.config(root=tmp_path)
    payload = msgspec.json.decode(capsys.readouterr().out)
    assert payload["source"] == str(tmp_path / "site.toml")
    assert payload["site"] == {"title": "CLI Site"}
    assert set(SECTION_NAMES) <= set(payload)


def test_config_falls_back_and_logs(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="folio_pages"):
        cli.config(root=tmp_path)
    payload = msgspec.json.decode(capsys.readouterr().out)
    assert payload["source"] is None
    assert payload["site"]["title"] == "Portfolio Website"
    assert "not_found" in caplog.text


def test_init_writes_starter_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.init(root=tmp_path)
    data = tomllib.loads((tmp_path / "site.toml").read_text(encoding="utf-8"))
    assert set(data) == set(SECTION_NAMES)
    assert data["navigation"]["show_contact"] is False
    assert "wrote" in capsys.readouterr().out


def test_init_refuses_to_overwrite(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "site.toml").write_text("[site]\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.init(root=tmp_path)
    assert "Refusing to overwrite" in capsys.readouterr().err
    cli.init(root=tmp_path, force=True)
    assert "Portfolio Website" in (tmp_path / "site.toml").read_text(encoding="utf-8")


def test_starter_config_round_trips_defaults() -> None:
    text = render_starter_config(today=dt.date(2030, 1, 1))
    data = tomllib.loads(text)
    assert data["site"]["copyright_year"] == 2030
    assert data["skills"] == {"networking": [], "technical": [], "certifications": []}
    assert text.startswith("# Site configuration")
