"""Load and validate render options for collection documentation builds.

This subpackage parses the optional ``collection-pages.yaml`` file, merges
command-line overrides, and produces a validated :class:`RenderOptions`
dataclass that the document assembler consumes. Invalid values raise
:class:`ConfigError` before any rendering starts.

Examples
--------
>>> from pathlib import Path
>>> from collection_pages.config import load_render_options, merge_overrides
>>> options = merge_overrides(load_render_options(), language="fr", divider="h2")
>>> (options.language, options.divider)
('fr', 'h2')
"""

from .helpers import read_logo
from .loader import load_render_options, merge_overrides
from .models import ConfigError, RenderOptions

__all__ = [
    "ConfigError",
    "RenderOptions",
    "load_render_options",
    "merge_overrides",
    "read_logo",
]
