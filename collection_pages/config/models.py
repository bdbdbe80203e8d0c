"""Typed dataclasses describing documentation render options."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from collection_pages._constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PYGMENTS_STYLE,
    DIVIDER_LEVELS,
)


class ConfigError(ValueError):
    """Raised when render options are invalid or cannot be loaded."""


@dc.dataclass(slots=True)
class RenderOptions:
    """Options controlling how a collection is rendered and where it is written.

    Attributes
    ----------
    output_path : Path
        Destination of the generated HTML document.
    language : str
        Translation table used for labels.
    logo : str or None
        Raw markup (typically SVG) embedded in the page header.
    divider : str or None
        Heading level (``"h1"`` .. ``"h6"``) that receives a separator rule.
    pygments_style : str
        Pygments style used for highlighted bodies and description code.
    """

    output_path: Path = Path(DEFAULT_OUTPUT_FILE)
    language: str = DEFAULT_LANGUAGE
    logo: str | None = None
    divider: str | None = None
    pygments_style: str = DEFAULT_PYGMENTS_STYLE

    def validate(self) -> RenderOptions:
        """Check option types and values, returning ``self`` when valid.

        Raises
        ------
        ConfigError
            If the language is not a non-empty string, the logo is neither a
            string nor ``None``, the divider is not a heading level, or the
            Pygments style is unknown.
        """
        if not isinstance(self.output_path, Path):
            msg = "Output file must be a path."
            raise ConfigError(msg)
        if not isinstance(self.language, str) or not self.language.strip():
            msg = "Language must be a non-empty string."
            raise ConfigError(msg)
        if self.logo is not None and not isinstance(self.logo, str):
            msg = "Logo must be a string or None."
            raise ConfigError(msg)
        if self.divider is not None and self.divider not in DIVIDER_LEVELS:
            levels = ", ".join(DIVIDER_LEVELS)
            msg = f"Divider must be one of: {levels}, or None."
            raise ConfigError(msg)
        if not isinstance(self.pygments_style, str) or not self.pygments_style:
            msg = "Pygments style must be a non-empty string."
            raise ConfigError(msg)
        try:
            get_style_by_name(self.pygments_style)
        except ClassNotFound as exc:
            msg = f"Unknown Pygments style: {self.pygments_style}"
            raise ConfigError(msg) from exc
        return self

    @property
    def has_logo(self) -> bool:
        return bool(self.logo and self.logo.strip())


__all__ = ["ConfigError", "RenderOptions"]
