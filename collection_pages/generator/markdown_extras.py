"""Markdown syntax common in API client descriptions but absent from core Markdown.

:class:`DescriptionExtrasExtension` adds ``~~strikethrough~~``, links for
bare ``http(s)://`` URLs, and ``- [ ]`` / ``- [x]`` task list items.
"""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import AtomicString

if typ.TYPE_CHECKING:
    from markdown import Markdown

STRIKETHROUGH_PATTERN = r"(~{2})(.+?)~{2}"
BARE_URL_PATTERN = r"(?<![\"'=(<\w/])(https?://[^\s<>\"]*[^\s<>\".,;:!?)\]'])"
TASK_MARKER = re.compile(r"^\[([ xX])\]\s+")


class BareUrlInlineProcessor(InlineProcessor):
    """Turn a bare ``http(s)://`` URL into a link to itself."""

    def handleMatch(  # type: ignore[override]
        self, m: re.Match[str], data: str
    ) -> tuple[etree.Element, int, int]:
        url = m.group(1)
        link = etree.Element("a", {"href": url})
        link.text = AtomicString(url)
        return link, m.start(0), m.end(0)


class TaskListTreeprocessor(Treeprocessor):
    """Replace a leading ``[ ]`` or ``[x]`` in list items with a checkbox."""

    def run(self, root: etree.Element) -> etree.Element:
        for item in list(root.iter("li")):
            holder = item
            if not (item.text or "").strip() and len(item) and item[0].tag == "p":
                holder = item[0]
            match = TASK_MARKER.match(holder.text or "")
            if match is None:
                continue
            box = etree.Element("input", {"type": "checkbox", "disabled": "disabled"})
            if match.group(1) in "xX":
                box.set("checked", "checked")
            box.tail = (holder.text or "")[match.end() :]
            holder.text = ""
            holder.insert(0, box)
            item.set("class", "task-list-item")
        return root


class DescriptionExtrasExtension(Extension):
    """Register strikethrough, bare URL and task list handling."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]
        # Bare URLs run after explicit and angle-bracket links and before emphasis.
        md.inlinePatterns.register(
            BareUrlInlineProcessor(BARE_URL_PATTERN, md), "collection_bare_url", 100
        )
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "collection_strikethrough",
            45,
        )
        md.treeprocessors.register(
            TaskListTreeprocessor(md), "collection_task_lists", 14
        )


__all__ = [
    "BareUrlInlineProcessor",
    "DescriptionExtrasExtension",
    "TaskListTreeprocessor",
]
