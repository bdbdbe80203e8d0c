"""Cyclopts CLI entrypoint for rendering API collections to HTML documentation.

The ``collection-pages`` console script defined here reads an exported API
collection (Postman v2.x JSON), renders it into one self-contained HTML page,
and writes the result. Options can come from command-line flags, ``INPUT_*``
environment variables, or an optional YAML configuration file; flags win.

Examples
--------
Render a collection with the default options:

>>> from collection_pages.cli import main
>>> main()  # doctest: +SKIP

Render in French with a logo and a divider under second-level headings:

>>> from collection_pages.cli import app
>>> app(
...     ["generate", "collection.json", "--lang", "fr", "--logo", "logo.svg",
...      "--divider", "h2"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .collection_parser import CollectionError
from .config import ConfigError, load_render_options, merge_overrides
from .document import CollectionDocsBuilder
from .translations import available_languages

app = App(name="collection-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate an HTML documentation page from a collection file.")
def generate(
    input_file: typ.Annotated[
        Path, Parameter(help="Exported collection JSON file", env_var="INPUT_FILE")
    ],
    *,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Output HTML file (default: api-doc.html)", env_var="INPUT_OUTPUT"),
    ] = None,
    lang: typ.Annotated[
        str | None,
        Parameter(help="Language for documentation labels", env_var="INPUT_LANG"),
    ] = None,
    logo: typ.Annotated[
        Path | None,
        Parameter(help="SVG or HTML logo file to embed", env_var="INPUT_LOGO"),
    ] = None,
    divider: typ.Annotated[
        str | None,
        Parameter(
            help="Heading level (h1-h6) that gets a separator rule",
            env_var="INPUT_DIVIDER",
        ),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Optional YAML file with render options", env_var="INPUT_CONFIG"),
    ] = None,
) -> None:
    """Render ``input_file`` into a single HTML document.

    Parameters
    ----------
    input_file : Path
        Collection JSON exported from an API client.
    output : Path or None, optional
        Destination file; overrides the configuration file value.
    lang : str or None, optional
        Label language code; must be one of :func:`available_languages`.
    logo : Path or None, optional
        Markup file embedded verbatim in the page header.
    divider : str or None, optional
        Heading level receiving a separator rule.
    config : Path or None, optional
        YAML configuration file providing defaults for the options above.

    Returns
    -------
    None
        Writes the document and prints its path.

    Raises
    ------
    SystemExit
        With status 1 after printing a single ``error:`` line when the
        options, the input collection, or the output write fail.
    """
    try:
        options = merge_overrides(
            load_render_options(config),
            output_path=output,
            language=lang,
            logo_path=logo,
            divider=divider,
        )
        supported = available_languages()
        if options.language not in supported:
            msg = (
                f"Unsupported language: {options.language}. "
                f"Available languages: {', '.join(supported)}"
            )
            raise ConfigError(msg)
        written = CollectionDocsBuilder(options).run(input_file)
    except (CollectionError, ConfigError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(f"wrote {_format_path(written)} (language: {options.language})")


@app.command(help="List the languages available for documentation labels.")
def languages() -> None:
    """Print each supported language code on its own line."""
    for code in available_languages():
        print(code)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``collection-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
