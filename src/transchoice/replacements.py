"""Placeholder substitution for ``:name`` style tokens.

The case of a matched token decides the case of the inserted value::

    apply_replacements("Hello :name", {"name": "ana"})   # "Hello ana"
    apply_replacements("Hello :Name", {"name": "ana"})   # "Hello Ana"
    apply_replacements("Hello :NAME", {"name": "ana"})   # "Hello ANA"
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

__all__ = ["apply_replacements", "sort_replacement_keys"]

_WORD_RE = re.compile(r"\w")


def sort_replacement_keys(keys: Iterable[str]) -> list[str]:
    """Order keys longest first so ``:countries`` is not eaten by ``:count``.

    The sort is stable: keys of equal length keep their original order.
    """
    return sorted(keys, key=len, reverse=True)


def _match_case(token: str, value: str) -> str:
    if token == token.upper():
        return value.upper()
    # First word character upper-cased, e.g. ":Name"
    if token == _WORD_RE.sub(lambda m: m.group(0).upper(), token, count=1):
        return value[:1].upper() + value[1:]
    return value


def apply_replacements(text: str, replacements: Mapping[str, Any]) -> str:
    """Replace ``:key`` placeholders in ``text``.

    Args:
        text: Message text
        replacements: Placeholder name (without ``:``) to value. Names match
            case-insensitively; values are converted with ``str()``.

    Returns:
        The text with every placeholder replaced
    """
    for key in sort_replacement_keys(replacements):
        value = str(replacements[key])
        pattern = re.compile(":" + re.escape(key), re.IGNORECASE)
        text = pattern.sub(lambda m, value=value: _match_case(m.group(0), value), text)
    return text
