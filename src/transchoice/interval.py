"""Math interval expressions used as explicit message rules.

An interval can represent a finite set of numbers::

    {1,2,3,4}

or the numbers between two bounds::

    [1, +Inf]
    ]-1,2[

The left delimiter can be ``[`` (inclusive) or ``]`` (exclusive). The right
delimiter can be ``[`` (exclusive) or ``]`` (inclusive). Besides numbers,
``-Inf``, ``+Inf``, ``Inf`` and ``*`` can be used for an unbounded side.
A left bound that reads as positive infinity (``[*,5]``) means "unbounded
below".

Numbers may carry a fractional part (``1.5``); it is truncated toward zero,
so ``{1.5}`` matches a count of 1.

Usage:
    from transchoice.interval import parse_interval, test_interval

    test_interval(2, "{1,2,3}")     # True
    test_interval(10, "]0,10[")     # False

    interval = parse_interval("[2,Inf]")
    interval.contains(5)            # True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from transchoice.exceptions import InvalidIntervalError
from transchoice.utils import ensure_count

__all__ = [
    "SetForm",
    "RangeForm",
    "Interval",
    "parse_interval",
    "search_interval",
    "test_interval",
]

_DIGITS = "0123456789"
_OPENERS = "{[]"


# =============================================================================
# Parsed Forms
# =============================================================================


@dataclass(frozen=True)
class SetForm:
    """A finite set of integers, e.g. ``{0}`` or ``{1,2,3}``."""

    values: tuple[int, ...]

    def contains(self, count: int) -> bool:
        return count in self.values

    def __str__(self) -> str:
        return "{" + ",".join(str(v) for v in self.values) + "}"


@dataclass(frozen=True)
class RangeForm:
    """A bounded or unbounded range, e.g. ``[2,Inf]`` or ``]0,10[``.

    Attributes:
        left_delimiter: ``[`` (inclusive) or ``]`` (exclusive)
        left: Lower bound, ``-math.inf`` when unbounded
        right: Upper bound, ``math.inf`` when unbounded
        right_delimiter: ``]`` (inclusive) or ``[`` (exclusive)
    """

    left_delimiter: str
    left: float
    right: float
    right_delimiter: str

    @property
    def left_inclusive(self) -> bool:
        return self.left_delimiter == "["

    @property
    def right_inclusive(self) -> bool:
        return self.right_delimiter == "]"

    def contains(self, count: int) -> bool:
        above = count >= self.left if self.left_inclusive else count > self.left
        below = count <= self.right if self.right_inclusive else count < self.right
        return above and below

    def __str__(self) -> str:
        return (
            f"{self.left_delimiter}{_format_bound(self.left)},"
            f"{_format_bound(self.right)}{self.right_delimiter}"
        )


Interval = Union[SetForm, RangeForm]


def _format_bound(value: float) -> str:
    if value == -math.inf:
        return "-Inf"
    if value == math.inf:
        return "+Inf"
    return str(int(value))


# =============================================================================
# Parser
# =============================================================================


class _IntervalParser:
    """Recursive-descent parser over ``text`` starting at ``pos``.

    Grammar::

        interval := set | range
        set      := "{" number ("," number)* "}"
        range    := ("[" | "]") bound "," bound ("[" | "]")
        bound    := "-Inf" | "+Inf" | "Inf" | "*" | number
        number   := "-"? digit+ ("." digit+)?

    Whitespace is allowed between any two tokens.
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def _fail(self, reason: str) -> InvalidIntervalError:
        return InvalidIntervalError(self.text, f"{reason} at position {self.pos}")

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _expect(self, char: str) -> None:
        self._skip_whitespace()
        if self._peek() != char:
            raise self._fail(f"expected '{char}'")
        self.pos += 1

    def parse_interval(self) -> Interval:
        char = self._peek()
        if char == "{":
            return self._parse_set()
        if char in ("[", "]"):
            return self._parse_range()
        raise self._fail("expected '{', '[' or ']'")

    def _parse_set(self) -> SetForm:
        self._expect("{")
        values = [self._parse_number()]
        while True:
            self._skip_whitespace()
            if self._peek() != ",":
                break
            self.pos += 1
            values.append(self._parse_number())
        self._expect("}")
        return SetForm(tuple(values))

    def _parse_range(self) -> RangeForm:
        left_delimiter = self._peek()
        self.pos += 1
        left = self._parse_bound()
        # "*" or "Inf" on the left means unbounded below
        if left == math.inf:
            left = -math.inf
        self._expect(",")
        right = self._parse_bound()
        self._skip_whitespace()
        right_delimiter = self._peek()
        if right_delimiter not in ("[", "]"):
            raise self._fail("expected '[' or ']'")
        self.pos += 1
        return RangeForm(left_delimiter, left, right, right_delimiter)

    def _parse_bound(self) -> float:
        self._skip_whitespace()
        for token, value in (
            ("-Inf", -math.inf),
            ("+Inf", math.inf),
            ("Inf", math.inf),
            ("*", math.inf),
        ):
            if self.text.startswith(token, self.pos):
                self.pos += len(token)
                return value
        return self._parse_number()

    def _parse_number(self) -> int:
        self._skip_whitespace()
        start = self.pos
        if self._peek() == "-":
            self.pos += 1
        digits_start = self.pos
        while self._peek() and self._peek() in _DIGITS:
            self.pos += 1
        if self.pos == digits_start:
            self.pos = start
            raise self._fail("expected a number")
        integer_part = self.text[start:self.pos]
        # Optional fraction, truncated toward zero
        if (
            self._peek() == "."
            and self.pos + 1 < len(self.text)
            and self.text[self.pos + 1] in _DIGITS
        ):
            self.pos += 1
            while self._peek() and self._peek() in _DIGITS:
                self.pos += 1
        return int(integer_part)


# =============================================================================
# Public API
# =============================================================================


def parse_interval(interval: str) -> Interval:
    """Parse a complete interval expression.

    Args:
        interval: Interval text; surrounding whitespace is ignored

    Returns:
        The parsed SetForm or RangeForm

    Raises:
        InvalidIntervalError: If ``interval`` is not a string or is not a
            well-formed interval expression in its entirety.
    """
    if not isinstance(interval, str):
        raise InvalidIntervalError(interval)

    text = interval.strip()
    parser = _IntervalParser(text)
    result = parser.parse_interval()
    if parser.pos != len(text):
        raise InvalidIntervalError(interval, f"unexpected trailing text at position {parser.pos}")
    return result


def search_interval(text: str) -> Interval | None:
    """Find the first interval expression anywhere inside ``text``.

    Returns:
        The parsed interval, or None when ``text`` contains none.
    """
    for pos, char in enumerate(text):
        if char not in _OPENERS:
            continue
        try:
            return _IntervalParser(text, pos).parse_interval()
        except InvalidIntervalError:
            continue
    return None


def test_interval(count: int, interval: str) -> bool:
    """Check whether ``count`` lies within ``interval``.

    Args:
        count: The amount of items
        interval: The interval expression to compare with

    Returns:
        True if ``count`` is within the interval.

    Raises:
        InvalidIntervalError: If the interval is malformed. This is never
            reported as a plain "no match".
        InvalidArgumentError: If ``count`` is not an integer.

    Example:
        >>> test_interval(0, "[-Inf,0]")
        True
        >>> test_interval(10, "]0,10]")
        True
    """
    count = ensure_count(count)
    return parse_interval(interval).contains(count)


# Keep pytest from collecting the public helper as a test function.
test_interval.__test__ = False  # type: ignore[attr-defined]
