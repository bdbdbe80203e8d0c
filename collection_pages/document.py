"""Assemble and persist the single-page API documentation.

This module wraps the tree walker output in the page shell defined by
``templates/api_doc.jinja``: header with the collection name, generation
date and optional logo, a sticky table of contents, the overview section,
and the expand/collapse script for long response bodies. All settings arrive
through :class:`~collection_pages.config.RenderOptions`; nothing is kept in
module state, so independent conversions can run side by side.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from collection_pages.config import RenderOptions
>>> from collection_pages.document import convert_collection
>>> convert_collection(Path("collection.json"), RenderOptions())  # doctest: +SKIP
PosixPath('api-doc.html')
"""

from __future__ import annotations

import datetime as dt
import logging
import os
import stat
import tempfile
import typing as typ
from pathlib import Path

from .collection_parser import load_collection
from .config import RenderOptions
from .generator import EndpointRenderer, HtmlContentRenderer, TreeWalker
from .generator.endpoint import build_environment
from .translations import Translations, load_translations

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from .collection_parser import Collection
    from .generator import ProseRenderer

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """Render a parsed collection into a complete HTML document."""

    def __init__(
        self,
        options: RenderOptions | None = None,
        *,
        translations: Translations | None = None,
        prose: ProseRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Validate options and prepare renderers and templates.

        Parameters
        ----------
        options : RenderOptions, optional
            Language, logo, divider and highlighting settings; defaults to
            :class:`RenderOptions` defaults.
        translations : Translations, optional
            Label table overriding the one selected by ``options.language``.
        prose : ProseRenderer, optional
            Description renderer; defaults to a Markdown
            :class:`HtmlContentRenderer`.
        templates_dir : Path, optional
            Directory containing ``api_doc.jinja`` and ``endpoint.jinja``.

        Raises
        ------
        ConfigError
            If ``options`` fail validation.
        """
        self.options = (options or RenderOptions()).validate()
        self.translations = translations or load_translations(self.options.language)
        self.code = HtmlContentRenderer(
            self.options.pygments_style,
            placeholder=self.translations["no_description_available"],
        )
        self.prose: ProseRenderer = prose or self.code
        self.env: Environment = build_environment(templates_dir)
        self.template = self.env.get_template("api_doc.jinja")
        self.walker = TreeWalker(
            EndpointRenderer(
                translations=self.translations,
                prose=self.prose,
                code=self.code,
                env=self.env,
            ),
            self.prose,
        )

    def assemble(
        self, collection: Collection, *, generated_at: dt.date | None = None
    ) -> str:
        """Return the full HTML document for ``collection``.

        Parameters
        ----------
        collection : Collection
            Parsed collection tree.
        generated_at : date, optional
            Date stamped in the header; defaults to today.

        Returns
        -------
        str
            Complete, self-contained HTML document ending with a newline.
        """
        walked = self.walker.walk(collection.items)
        stamp = generated_at or dt.date.today()
        context = {
            "collection": collection,
            "t": self.translations,
            "lang": self.translations.language,
            "generated_on": stamp.strftime("%d/%m/%Y"),
            "logo": self.options.logo if self.options.has_logo else None,
            "divider": self.options.divider,
            "overview_html": self.prose.render(collection.description),
            "toc_html": walked.toc_html,
            "content_html": walked.content_html,
            "pygments_css": self.code.stylesheet,
            "script_labels": {
                "show_all": self.translations["show_all"],
                "collapse": self.translations["collapse"],
            },
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


class CollectionDocsBuilder:
    """Load a collection file, render it, and write the HTML document."""

    def __init__(
        self, options: RenderOptions | None = None, *, templates_dir: Path | None = None
    ) -> None:
        self.options = (options or RenderOptions()).validate()
        self.assembler = DocumentAssembler(self.options, templates_dir=templates_dir)

    def run(self, input_path: Path) -> Path:
        """Render ``input_path`` and write it to ``options.output_path``.

        Returns
        -------
        Path
            Path of the written document.

        Raises
        ------
        CollectionError
            If the input is missing, invalid JSON, or not a collection.
        OSError
            If the output cannot be written.

        Notes
        -----
        The document is written to a temporary file beside the target and
        moved into place, so a failed run never leaves a partial document.
        """
        collection = load_collection(input_path)
        html = self.assembler.assemble(collection)
        output_path = self.options.output_path
        _write_atomic(output_path, html)
        logger.debug("wrote %s (%d bytes)", output_path, len(html))
        return output_path


def convert_collection(input_path: Path, options: RenderOptions | None = None) -> Path:
    """Convert the collection at ``input_path`` and return the output path."""
    return CollectionDocsBuilder(options).run(input_path)


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _published_mode(path)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _published_mode(path: Path) -> int:
    """Return the mode of the file being replaced, else ``0o666`` less umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


__all__ = ["CollectionDocsBuilder", "DocumentAssembler", "convert_collection"]
