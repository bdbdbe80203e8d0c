"""Content-type detection and body formatting for example responses."""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ

from collection_pages._constants import (
    COLLAPSE_LINE_THRESHOLD,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LANGUAGE_TAG,
)

if typ.TYPE_CHECKING:
    from collection_pages.collection_parser import KeyValue, ResponseExample

# Checked in order; the first substring found in the content type wins.
CONTENT_TYPE_LANGUAGES: tuple[tuple[str, str], ...] = (
    ("json", "json"),
    ("xml", "xml"),
    ("html", "html"),
    ("javascript", "javascript"),
)


@dc.dataclass(slots=True)
class FormattedBody:
    """Display metadata for one response example.

    Attributes
    ----------
    content_type : str
        Lower-cased ``Content-Type`` header value or ``"text/plain"``.
    language : str
        Highlighting language tag for the body.
    body : str or None
        Body text, pretty-printed when it is valid JSON; ``None`` when the
        example has no body.
    collapsed : bool
        Whether the body is long enough to render in a height-limited
        container with an expand control. The full text is always kept.
    """

    content_type: str = DEFAULT_CONTENT_TYPE
    language: str = DEFAULT_LANGUAGE_TAG
    body: str | None = None
    collapsed: bool = False

    @property
    def is_default_content_type(self) -> bool:
        return self.content_type == DEFAULT_CONTENT_TYPE


def format_response(response: ResponseExample) -> FormattedBody:
    """Resolve content type, language, and display body for ``response``.

    Parameters
    ----------
    response : ResponseExample
        Example response taken from the collection.

    Returns
    -------
    FormattedBody
        Formatting decisions for the example. JSON bodies that fail to parse
        fall back to their original text.
    """
    content_type, language = detect_content_type(response.headers)
    if response.preview_language:
        language = response.preview_language

    if response.body is None:
        return FormattedBody(content_type=content_type, language=language)

    body = response.body
    if language == "json":
        body = pretty_json(body)
    return FormattedBody(
        content_type=content_type,
        language=language,
        body=body,
        collapsed=is_long(body),
    )


def detect_content_type(headers: typ.Iterable[KeyValue]) -> tuple[str, str]:
    """Return ``(content_type, language)`` derived from a ``Content-Type`` header."""
    header = next(
        (entry for entry in headers if entry.key.lower() == "content-type"), None
    )
    if header is None or not header.value:
        return DEFAULT_CONTENT_TYPE, DEFAULT_LANGUAGE_TAG
    content_type = header.value.lower()
    for marker, language in CONTENT_TYPE_LANGUAGES:
        if marker in content_type:
            return content_type, language
    return content_type, DEFAULT_LANGUAGE_TAG


def pretty_json(text: str) -> str:
    """Re-serialize ``text`` with two-space indentation, or return it unchanged."""
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        return text
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def is_long(text: str) -> bool:
    """Return ``True`` when ``text`` spans more lines than the collapse threshold."""
    return len(text.split("\n")) > COLLAPSE_LINE_THRESHOLD


__all__ = [
    "CONTENT_TYPE_LANGUAGES",
    "FormattedBody",
    "detect_content_type",
    "format_response",
    "is_long",
    "pretty_json",
]
