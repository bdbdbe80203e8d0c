"""Label tables used to localize generated documentation.

Each supported language ships as ``<code>.yaml`` next to this module. Tables
are loaded on demand and merged over the English defaults so a partially
translated file never leaves a label blank.

Examples
--------
>>> from collection_pages.translations import load_translations
>>> load_translations("fr")["show_all"]
'Tout afficher'
>>> load_translations("xx")["show_all"]  # unknown codes fall back to English
'Show all'
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from collection_pages._constants import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).parent

TRANSLATION_KEYS = (
    "overview",
    "table_of_contents",
    "documentation_generated",
    "no_description_available",
    "no_request_info_available",
    "query_parameters",
    "parameter",
    "value",
    "description",
    "headers",
    "name",
    "request_body",
    "form_data",
    "key",
    "type",
    "response_example",
    "content_type",
    "show_all",
    "collapse",
)


class Translations(typ.Mapping[str, str]):
    """Read-only label table for one language."""

    def __init__(self, language: str, labels: typ.Mapping[str, str]) -> None:
        self.language = language
        self._labels = dict(labels)

    def __getitem__(self, key: str) -> str:
        return self._labels[key]

    def __iter__(self) -> typ.Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)


def available_languages() -> list[str]:
    """Return the language codes that ship a translation file, sorted."""
    return sorted(path.stem for path in TRANSLATIONS_DIR.glob("*.yaml"))


def load_translations(language: str = DEFAULT_LANGUAGE) -> Translations:
    """Load the label table for ``language``.

    Parameters
    ----------
    language : str, optional
        Language code such as ``"en"`` or ``"fr"``.

    Returns
    -------
    Translations
        Labels for ``language`` layered over the English table. Unknown
        languages log a warning and return the English table.
    """
    defaults = _read_table(DEFAULT_LANGUAGE)
    if language == DEFAULT_LANGUAGE:
        return Translations(DEFAULT_LANGUAGE, defaults)
    if language not in available_languages():
        logger.warning(
            "Translation file for language '%s' not found. Falling back to English.",
            language,
        )
        return Translations(DEFAULT_LANGUAGE, defaults)
    labels = dict(defaults)
    labels.update(_read_table(language))
    return Translations(language, labels)


def _read_table(language: str) -> dict[str, str]:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    path = TRANSLATIONS_DIR / f"{language}.yaml"
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - packaging error guard
        msg = f"Translation file '{path.name}' must contain a mapping."
        raise TypeError(msg)
    return {str(key): str(value) for key, value in loaded.items() if value is not None}


__all__ = [
    "TRANSLATION_KEYS",
    "Translations",
    "available_languages",
    "load_translations",
]
