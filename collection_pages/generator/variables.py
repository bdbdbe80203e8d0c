"""Strip ``{{variable}}`` placeholders from collection values before display."""

from __future__ import annotations

import re
import typing as typ

TEMPLATE_VARIABLE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

T = typ.TypeVar("T")


def clean_template_variables(value: T) -> T:
    """Replace each ``{{name}}`` placeholder in ``value`` with ``name``.

    Values are not resolved; the placeholder name itself is shown. Non-string
    input is returned unchanged.

    Examples
    --------
    >>> clean_template_variables("{{baseUrl}}/users/{{id}}")
    'baseUrl/users/id'
    >>> clean_template_variables(None) is None
    True
    """
    if not isinstance(value, str):
        return value
    return typ.cast("T", TEMPLATE_VARIABLE_PATTERN.sub(r"\1", value))


__all__ = ["TEMPLATE_VARIABLE_PATTERN", "clean_template_variables"]
