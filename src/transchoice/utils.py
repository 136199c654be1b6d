"""Shared argument checks and arithmetic helpers."""

from __future__ import annotations

from typing import Any

from transchoice.exceptions import InvalidArgumentError


def ensure_count(count: Any) -> int:
    """Validate that ``count`` is a plain integer.

    ``bool`` is rejected even though it subclasses ``int``; so are floats,
    including integral ones such as ``2.0``.

    Raises:
        InvalidArgumentError: If ``count`` is not an ``int``.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError("count", count, "int")
    return count


def ensure_text(name: str, value: Any) -> str:
    """Validate that ``value`` is a string."""
    if not isinstance(value, str):
        raise InvalidArgumentError(name, value, "str")
    return value


def rem(n: int, d: int) -> int:
    """Truncated remainder: the result takes the sign of ``n``.

    Python's ``%`` floors, so ``-19 % 100 == 81``. Plural rules are written
    against truncating arithmetic where ``-19 rem 100 == -19``.
    """
    r = abs(n) % d
    return -r if n < 0 else r
