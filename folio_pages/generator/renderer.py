"""Render blog markdown into HTML with syntax-highlighted code blocks."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS: tuple[str, ...] = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
    "footnotes",
    "smarty",
)


class HtmlContentRenderer:
    """Convert post bodies to HTML using a shared Pygments style."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer for the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML; blank input renders to ``""``."""
        normalized = _normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                },
                "smarty": {"smart_dashes": True, "smart_quotes": True},
            },
        )
        html = md.convert(normalized)
        return _annotate_languages(html, normalized)


def _normalize_fenced_blocks(text: str) -> str:
    """Outdent fences nested in list items and drop ``,attr`` labels."""
    without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

    def _strip_labels(match: re.Match[str]) -> str:
        fence, language, _extras = match.groups()
        return f"{fence}{language or ''}"

    return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


def _annotate_languages(html: str, source_markdown: str) -> str:
    """Attach a ``data-language`` attribute to each highlighted block."""
    languages = [
        match.group(1) or "text"
        for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
    ]
    if not languages:
        return html
    lang_iter = iter(languages)

    def _repl(_match: re.Match[str]) -> str:
        lang = next(lang_iter, "text")
        return f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'

    return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["CODE_BLOCK_PATTERN", "MARKDOWN_EXTENSIONS", "HtmlContentRenderer"]
