"""Walk a collection tree into table-of-contents and content fragments.

The walker visits every node once, depth first, in source order. Each node's
anchor is claimed a single time and written into both fragments, so every
table-of-contents link resolves to exactly one content section. Traversal
uses an explicit stack rather than recursion, which keeps arbitrarily deep
folder trees clear of the interpreter's recursion limit.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from html import escape

from collection_pages._constants import FOLDER_HEADING_LEVEL, MAX_HEADING_LEVEL
from collection_pages.collection_parser import Endpoint, Folder

from .anchors import AnchorRegistry, endpoint_anchor, folder_anchor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from collection_pages.collection_parser import Node

    from .endpoint import EndpointRenderer
    from .renderer import ProseRenderer

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class WalkResult:
    """Fragments produced by one traversal.

    Attributes
    ----------
    toc_html : str
        ``<li>`` entries for the table of contents (without the outer list).
    content_html : str
        Folder sections and endpoint blocks in document order.
    anchors : list[str]
        Every anchor emitted, in document order.
    """

    toc_html: str
    content_html: str
    anchors: list[str]


@dc.dataclass(slots=True)
class _Visit:
    node: Node
    path: tuple[str, ...]
    level: int


@dc.dataclass(slots=True)
class _Close:
    has_children: bool


class TreeWalker:
    """Render folders and endpoints into parallel navigation and content."""

    def __init__(self, endpoint_renderer: EndpointRenderer, prose: ProseRenderer) -> None:
        self.endpoint_renderer = endpoint_renderer
        self.prose = prose

    def walk(self, nodes: cabc.Sequence[Node]) -> WalkResult:
        """Traverse ``nodes`` and return both fragments.

        Parameters
        ----------
        nodes : Sequence[Node]
            Top-level folders and endpoints of a collection.

        Returns
        -------
        WalkResult
            Table-of-contents and content fragments keyed by the same anchors.
        """
        registry = AnchorRegistry()
        toc: list[str] = []
        content: list[str] = []
        stack: list[_Visit | _Close] = [
            _Visit(node, (), FOLDER_HEADING_LEVEL) for node in reversed(nodes)
        ]
        while stack:
            item = stack.pop()
            if isinstance(item, _Close):
                toc.append("</ul></li>" if item.has_children else "</li>")
                content.append("</section>")
                continue
            match item.node:
                case Folder() as folder:
                    path = (*item.path, folder.name)
                    anchor = registry.claim(folder_anchor(path))
                    self._open_folder(folder, anchor, item.level, toc, content)
                    stack.append(_Close(has_children=bool(folder.children)))
                    child_level = min(item.level + 1, MAX_HEADING_LEVEL)
                    stack.extend(
                        _Visit(child, path, child_level)
                        for child in reversed(folder.children)
                    )
                case Endpoint() as endpoint:
                    anchor = registry.claim(endpoint_anchor(item.path, endpoint.name))
                    toc.append(_toc_link(anchor, endpoint.name) + "</li>")
                    content.append(
                        self.endpoint_renderer.render(item.path, endpoint, anchor=anchor)
                    )
        logger.debug("rendered %d anchors", len(registry.claimed))
        return WalkResult(
            toc_html="".join(toc),
            content_html="".join(content),
            anchors=list(registry.claimed),
        )

    def _open_folder(
        self,
        folder: Folder,
        anchor: str,
        level: int,
        toc: list[str],
        content: list[str],
    ) -> None:
        toc.append(_toc_link(anchor, folder.name))
        if folder.children:
            toc.append("<ul>")
        heading = f"h{level}"
        content.append(
            f'<section id="{escape(anchor)}">'
            f"<{heading}>{escape(folder.name)}</{heading}>"
        )
        if folder.description:
            content.append(
                '<div class="folder-description">'
                f"{self.prose.render(folder.description)}</div>"
            )


def _toc_link(anchor: str, label: str) -> str:
    return f'<li><a href="#{escape(anchor)}">{escape(label)}</a>'


__all__ = ["TreeWalker", "WalkResult"]
