r"""Split markdown blog sources into YAML front-matter and body.

Example
-------
>>> from folio_pages.frontmatter import split_frontmatter
>>> meta, body = split_frontmatter("---\ntitle: Hello\n---\nBody text\n")
>>> meta["title"], body
('Hello', 'Body text\n')
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONTMATTER_DELIMITER = "---"


class PostExtractionError(ValueError):
    """Raised when a blog source cannot be turned into a post record."""


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def split_frontmatter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the front-matter mapping and the remaining markdown body.

    The block must open on the first line with ``---`` and close on the next
    ``---`` line. Sources without a complete block yield ``({}, text)``.

    Raises
    ------
    PostExtractionError
        If the block is not valid YAML or does not hold a mapping.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return {}, text

    end_idx: int | None = None
    for idx, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            end_idx = idx
            break
    if end_idx is None:
        return {}, text

    block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])
    if body.startswith("\n"):
        body = body[1:]

    try:
        loaded = _new_yaml().load(block)
    except (YAMLError, ValueError) as exc:
        # Impossible timestamps such as 2024-02-30 surface as ValueError.
        msg = f"Invalid front-matter: {exc}"
        raise PostExtractionError(msg) from exc
    match loaded:
        case None:
            return {}, body
        case dict():
            return dict(loaded), body
        case _:
            msg = "Front-matter must be a mapping."
            raise PostExtractionError(msg)


__all__ = ["FRONTMATTER_DELIMITER", "PostExtractionError", "split_frontmatter"]
