"""Anchor identifiers shared by the table of contents and content sections."""

from __future__ import annotations

import logging
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"-{2,}")


def slugify(text: object) -> str:
    """Return a lower-case, URL-fragment-safe slug for ``text``.

    Parameters
    ----------
    text : object
        Display text; non-strings are converted with ``str``.

    Returns
    -------
    str
        Slug containing only ASCII word characters and single hyphens, never
        starting or ending with a hyphen. Applying ``slugify`` to its own
        output returns the same value.

    Examples
    --------
    >>> slugify("  Get User (by id) ")
    'get-user-by-id'
    """
    slug = str(text).lower()
    slug = _WHITESPACE.sub("-", slug)
    slug = _NON_WORD.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def folder_anchor(path: cabc.Sequence[str]) -> str:
    """Return the anchor of the folder whose name path (own name last) is ``path``."""
    return f"folder-{slugify('-'.join(path))}"


def endpoint_anchor(path: cabc.Sequence[str], name: str) -> str:
    """Return the anchor of endpoint ``name`` nested under folder ``path``."""
    if not path:
        return f"endpoint-{slugify(name)}"
    prefix = "-".join(slugify(segment) for segment in path)
    return f"endpoint-{prefix}-{slugify(name)}"


class AnchorRegistry:
    """Hand out document-unique anchors, suffixing repeated ones."""

    def __init__(self) -> None:
        self._used: set[str] = set()
        self.claimed: list[str] = []

    def claim(self, base: str) -> str:
        """Reserve ``base`` or the first free ``base-N`` variant and return it."""
        candidate = base
        suffix = 2
        while candidate in self._used:
            candidate = f"{base}-{suffix}"
            suffix += 1
        if candidate != base:
            logger.warning("duplicate anchor %r renamed to %r", base, candidate)
        self._used.add(candidate)
        self.claimed.append(candidate)
        return candidate


__all__ = ["AnchorRegistry", "endpoint_anchor", "folder_anchor", "slugify"]
