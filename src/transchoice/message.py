"""Splitting of pipe-delimited message templates into variants.

A template holds one or more variants separated by ``|``. Any variant may be
prefixed by an explicit interval rule and whitespace::

    "apple|apples"
    "{0} No apples|{1} One apple|[2,Inf] :count apples"
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from transchoice.interval import search_interval

__all__ = ["Variant", "split_message", "is_single_variant", "SEPARATOR"]

SEPARATOR = "|"

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Variant:
    """One segment of a message template.

    Attributes:
        text: Variant text with any rule prefix removed
        rule: Explicit interval rule text, or None
    """

    text: str
    rule: str | None = None

    @property
    def has_rule(self) -> bool:
        return self.rule is not None


def is_single_variant(template: str) -> bool:
    """True when ``template`` has no variant separator."""
    return SEPARATOR not in template


def split_message(template: str) -> list[Variant]:
    """Split a template into its ordered variants.

    A template without ``|`` is returned as a single variant, untouched:
    it is neither trimmed nor checked for a rule prefix.

    Otherwise every piece is trimmed. A piece containing an interval
    expression anywhere is split at its first whitespace run: the token
    before it becomes the rule and everything after it the text.

    Args:
        template: The message template

    Returns:
        Variants in template order
    """
    if is_single_variant(template):
        return [Variant(template)]

    variants: list[Variant] = []
    for piece in template.split(SEPARATOR):
        piece = piece.strip()
        if search_interval(piece) is not None:
            rule, *rest = _WHITESPACE_RE.split(piece, maxsplit=1)
            variants.append(Variant(rest[0] if rest else "", rule))
        else:
            variants.append(Variant(piece))
    return variants
