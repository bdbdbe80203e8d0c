"""Markdown descriptions and highlighted bodies for endpoint documentation.

Descriptions in a collection are Markdown written by API authors; request and
response bodies are raw payloads. Both end up as HTML fragments sharing one
Pygments style, so the page only needs a single ``.codehilite`` stylesheet.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from collection_pages._constants import DEFAULT_LANGUAGE_TAG, DEFAULT_PYGMENTS_STYLE

from .link_rewriter import ExternalLinkExtension
from .markdown_extras import DescriptionExtrasExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
    from pygments.lexer import Lexer
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

DESCRIPTION_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")
HIGHLIGHT_WRAPPER = re.compile(r'<div class="codehilite">')


class ProseRenderer(typ.Protocol):
    """Anything that turns description markup into an HTML fragment."""

    def render(self, text: str | None) -> str: ...


def lexer_for(language: str | None) -> Lexer:
    """Return a lexer for ``language``, or the plain-text lexer if unknown.

    Trailing newlines are preserved so collapsed bodies keep their line count.
    """
    try:
        return get_lexer_by_name(language or DEFAULT_LANGUAGE_TAG, stripnl=False)
    except ClassNotFound:
        return get_lexer_by_name(DEFAULT_LANGUAGE_TAG, stripnl=False)


def tag_language(html: str, language: str | None) -> str:
    """Mark the first highlighted block in ``html`` with ``data-language``."""
    opening = (
        '<div class="codehilite" data-language="'
        f'{escape(language or DEFAULT_LANGUAGE_TAG, quote=True)}">'
    )
    return HIGHLIGHT_WRAPPER.sub(lambda _match: opening, html, count=1)


class HtmlContentRenderer:
    """Render descriptions and payloads with one Pygments style.

    ``render`` substitutes a placeholder paragraph when a description is
    blank; ``markdown`` returns an empty string instead.
    """

    def __init__(
        self,
        pygments_style: str = DEFAULT_PYGMENTS_STYLE,
        *,
        placeholder: str = "",
        link_extension: Extension | None = None,
    ) -> None:
        """Create a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style shared by descriptions and payloads.
        placeholder : str, optional
            Message shown by :meth:`render` for blank descriptions.
        link_extension : Extension, optional
            Markdown extension applied to description links; defaults to
            :class:`ExternalLinkExtension`.
        """
        self.pygments_style = pygments_style
        self.placeholder = placeholder
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._md = Markdown(
            extensions=[
                *DESCRIPTION_EXTENSIONS,
                DescriptionExtrasExtension(),
                link_extension or ExternalLinkExtension(),
            ],
            extension_configs={
                "codehilite": {
                    "css_class": "codehilite",
                    "guess_lang": False,
                    "linenums": False,
                    "pygments_style": pygments_style,
                }
            },
        )

    @property
    def stylesheet(self) -> str:
        """Return the ``.codehilite`` rules for the configured style."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, text: str | None) -> str:
        html = self.markdown(text or "")
        if html or not self.placeholder:
            return html
        return f"<p>{escape(self.placeholder)}</p>"

    def markdown(self, text: str) -> str:
        """Convert a Markdown description; blank input yields ``""``."""
        if not text.strip():
            return ""
        try:
            return self._md.convert(text)
        finally:
            self._md.reset()

    def code_block(self, code: str, language: str | None = None) -> str:
        """Highlight a request or response payload.

        Parameters
        ----------
        code : str
            Payload text, already stripped of template placeholders.
        language : str, optional
            Pygments lexer name; unknown or missing names fall back to
            ``"text"`` while the original label is kept in ``data-language``.

        Returns
        -------
        str
            ``<div class="codehilite" data-language="...">`` block.
        """
        html = highlight(code, lexer_for(language), self._formatter)
        return tag_language(html, language)


__all__ = [
    "DESCRIPTION_EXTENSIONS",
    "HtmlContentRenderer",
    "ProseRenderer",
    "lexer_for",
    "tag_language",
]
