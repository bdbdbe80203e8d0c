"""Utility helpers shared by the render options loader."""

from __future__ import annotations

from pathlib import Path

from .models import ConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_divider(value: object | None) -> str | None:
    """Return a lower-cased divider level such as ``"h2"``, or None."""
    text = _optional_str(value)
    return text.lower() if text else None


def _resolve_path(value: str, base_dir: Path | None) -> Path:
    """Resolve ``value`` relative to ``base_dir`` unless it is absolute."""
    path = Path(value).expanduser()
    if base_dir is None or path.is_absolute():
        return path
    return base_dir / path


def read_logo(path: Path) -> str:
    """Return the logo markup stored at ``path``.

    Raises
    ------
    ConfigError
        If the file cannot be read as UTF-8 text.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Could not read logo file '{path}': {exc}"
        raise ConfigError(msg) from exc


__all__ = ["_normalize_divider", "_optional_str", "_resolve_path", "read_logo"]
