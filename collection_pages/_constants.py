"""Common literal values used across collection_pages.

These constants keep defaults and rendering thresholds centralized so the
generator, templates, CLI, and tests can import the same values without
drifting. Intended for internal use within the collection_pages package.

Examples
--------
>>> from collection_pages import _constants
>>> _constants.MAX_HEADING_LEVEL
6
>>> "h3" in _constants.DIVIDER_LEVELS
True
"""

DEFAULT_OUTPUT_FILE = "api-doc.html"
DEFAULT_LANGUAGE = "en"
DEFAULT_PYGMENTS_STYLE = "default"

DIVIDER_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")
FOLDER_HEADING_LEVEL = 2
MAX_HEADING_LEVEL = 6

DEFAULT_METHOD = "GET"
DEFAULT_CONTENT_TYPE = "text/plain"
DEFAULT_LANGUAGE_TAG = "text"
COLLAPSE_LINE_THRESHOLD = 10

# Query parameters carrying credentials are documented in the overview instead.
HIDDEN_QUERY_KEYS = frozenset({"token", "key"})
