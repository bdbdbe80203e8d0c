"""Load render options from YAML and merge command-line overrides."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from collection_pages._constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PYGMENTS_STYLE,
)

from .helpers import _normalize_divider, _optional_str, _resolve_path, read_logo
from .models import ConfigError, RenderOptions

KNOWN_KEYS = frozenset({"output", "language", "logo", "divider", "pygments_style"})


def load_render_options(path: Path | None = None) -> RenderOptions:
    """Load render options from an optional YAML configuration file.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to a YAML mapping with any of the keys ``output``,
        ``language``, ``logo`` (a path to a markup file, relative to the
        configuration file), ``divider`` and ``pygments_style``. When
        ``None``, the built-in defaults are returned.

    Returns
    -------
    RenderOptions
        Validated options.

    Raises
    ------
    ConfigError
        If the file is missing, cannot be parsed, is not a mapping, contains
        unknown keys, or yields invalid option values.

    Examples
    --------
    >>> from pathlib import Path
    >>> from collection_pages.config import load_render_options
    >>> load_render_options().language
    'en'
    >>> load_render_options(Path("collection-pages.yaml"))  # doctest: +SKIP
    RenderOptions(output_path=PosixPath('docs/api.html'), ...)
    """
    if path is None:
        return RenderOptions().validate()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise ConfigError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Configuration file '{path}' is not valid YAML: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    base_dir = path.parent
    output = _optional_str(raw.get("output")) or DEFAULT_OUTPUT_FILE
    logo_path = _optional_str(raw.get("logo"))
    return RenderOptions(
        output_path=_resolve_path(output, base_dir),
        language=_optional_str(raw.get("language")) or DEFAULT_LANGUAGE,
        logo=read_logo(_resolve_path(logo_path, base_dir)) if logo_path else None,
        divider=_normalize_divider(raw.get("divider")),
        pygments_style=_optional_str(raw.get("pygments_style"))
        or DEFAULT_PYGMENTS_STYLE,
    ).validate()


def merge_overrides(
    base: RenderOptions,
    *,
    output_path: Path | None = None,
    language: str | None = None,
    logo_path: Path | None = None,
    divider: str | None = None,
) -> RenderOptions:
    """Return ``base`` with any non-``None`` overrides applied and validated.

    Parameters
    ----------
    base : RenderOptions
        Options loaded from defaults or a configuration file.
    output_path : Path, optional
        Replacement output path.
    language : str, optional
        Replacement language code.
    logo_path : Path, optional
        Path to a logo markup file read into ``logo``.
    divider : str, optional
        Replacement divider heading level.

    Raises
    ------
    ConfigError
        If the logo file cannot be read or the merged options are invalid.
    """
    return RenderOptions(
        output_path=output_path or base.output_path,
        language=language or base.language,
        logo=read_logo(logo_path) if logo_path else base.logo,
        divider=_normalize_divider(divider) if divider else base.divider,
        pygments_style=base.pygments_style,
    ).validate()


__all__ = ["load_render_options", "merge_overrides"]
