"""Markdown extension that opens external description links in a new window."""

from __future__ import annotations

import typing as typ

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from markdown import Markdown

EXTERNAL_SCHEMES = ("http://", "https://", "//")


class ExternalLinkExtension(Extension):
    """Register :class:`ExternalLinkTreeprocessor` on a Markdown instance."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]
        """Register the external-link treeprocessor on the provided Markdown instance."""
        processor = ExternalLinkTreeprocessor(md)
        md.treeprocessors.register(processor, "collection_external_links", 15)


class ExternalLinkTreeprocessor(Treeprocessor):
    """Add ``target="_blank"`` and a safe ``rel`` to absolute links."""

    def run(self, root: typ.Any) -> typ.Any:
        for element in root.iter("a"):
            if is_external(element.get("href")):
                element.set("target", "_blank")
                element.set("rel", "noopener noreferrer")
        return root


def is_external(target: str | None) -> bool:
    """Return ``True`` when ``target`` points outside the generated document.

    Parameters
    ----------
    target : str or None
        Link target taken from the rendered Markdown.

    Returns
    -------
    bool
        ``True`` for absolute ``http(s)`` and protocol-relative URLs; ``False``
        for in-page anchors, relative paths, and empty targets.
    """
    if not target:
        return False
    return target.lower().startswith(EXTERNAL_SCHEMES)


__all__ = ["ExternalLinkExtension", "ExternalLinkTreeprocessor", "is_external"]
