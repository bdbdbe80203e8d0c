"""Render exported API collections into single-page HTML documentation.

This package exposes the CLI entry points used by the ``collection-pages``
console script together with the library functions behind them.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``convert_collection``: Load, render, and write one collection file.
- ``DocumentAssembler``: Render a parsed collection to an HTML string.

Examples
--------
>>> from pathlib import Path
>>> from collection_pages import convert_collection
>>> convert_collection(Path("collection.json"))  # doctest: +SKIP
PosixPath('api-doc.html')
"""

from __future__ import annotations

from .cli import app, main
from .document import CollectionDocsBuilder, DocumentAssembler, convert_collection

__all__ = [
    "CollectionDocsBuilder",
    "DocumentAssembler",
    "app",
    "convert_collection",
    "main",
]
