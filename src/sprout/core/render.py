"""Mustache-style variable substitution for template files."""

from __future__ import annotations

import re
from collections.abc import Mapping

PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_.]*)\s*\}\}")


def render(content: str, variables: Mapping[str, object]) -> str:
    """
    Replace every `{{ name }}` placeholder in *content*.

    Bound names are replaced by their string value, unbound names by the
    empty string. Text outside placeholders is returned untouched.
    """

    def _substitute(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER.sub(_substitute, content)
