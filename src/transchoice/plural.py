"""Plural-form rules for message variants.

Maps a count and a locale code to the zero-based index of the plural form
to use, following the language-family grammars used by gettext and the
Zend/Symfony translation components.

Each family is a small pure function over the count. Locales are looked up
by exact, case-sensitive code; unknown codes fall back to a rule that always
returns 0 (no pluralization).

Remainders are truncated (they keep the sign of the count), so negative
counts resolve the same way the classic C-style rule expressions do.

Usage:
    from transchoice.plural import plural_form, number_of_forms

    plural_form(21, "ru")      # 0
    plural_form(5, "ar")       # 3
    number_of_forms("sl")      # 4
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from transchoice.utils import ensure_count, rem

logger = logging.getLogger(__name__)

__all__ = [
    "PluralFamily",
    "LOCALE_FAMILIES",
    "plural_form",
    "plural_family",
    "number_of_forms",
    "supported_locales",
    "is_supported_locale",
]


class PluralFamily(str, Enum):
    """Plural grammar families, each shared by a group of locales."""

    DEFAULT = "default"
    NONE = "none"
    ONE_OTHER = "one_other"
    ZERO_ONE_OTHER = "zero_one_other"
    SLAVIC = "slavic"
    CZECH = "czech"
    IRISH = "irish"
    LITHUANIAN = "lithuanian"
    SLOVENIAN = "slovenian"
    MACEDONIAN = "macedonian"
    MALTESE = "maltese"
    LATVIAN = "latvian"
    POLISH = "polish"
    WELSH = "welsh"
    ROMANIAN = "romanian"
    ARABIC = "arabic"

    @property
    def forms(self) -> int:
        """Number of distinct plural forms the family produces."""
        return _FAMILY_FORMS[self]

    def resolve(self, count: int) -> int:
        """Apply the family rule to ``count``."""
        return _FAMILY_RULES[self](count)


# =============================================================================
# Family Rules
# =============================================================================


def _always_zero(n: int) -> int:
    return 0


def _one_other(n: int) -> int:
    # One: n = 1
    return 0 if n == 1 else 1


def _zero_one_other(n: int) -> int:
    # One: n = 0, 1
    return 0 if n in (0, 1) else 1


def _slavic(n: int) -> int:
    # One: n % 10 = 1 and n % 100 != 11
    # Few: n % 10 = 2..4 and n % 100 not in 10..19
    n10 = rem(n, 10)
    n100 = rem(n, 100)
    if n10 == 1 and n100 != 11:
        return 0
    if 2 <= n10 <= 4 and (n100 < 10 or n100 >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    # Like Slavic, but "few" covers every last digit from 2 upward
    n10 = rem(n, 10)
    n100 = rem(n, 100)
    if n10 == 1 and n100 != 11:
        return 0
    if n10 >= 2 and (n100 < 10 or n100 >= 20):
        return 1
    return 2


def _slovenian(n: int) -> int:
    n100 = rem(n, 100)
    if n100 == 1:
        return 0
    if n100 == 2:
        return 1
    if n100 in (3, 4):
        return 2
    return 3


def _macedonian(n: int) -> int:
    return 0 if rem(n, 10) == 1 else 1


def _maltese(n: int) -> int:
    n100 = rem(n, 100)
    if n == 1:
        return 0
    if n == 0 or 1 < n100 < 11:
        return 1
    if 10 < n100 < 20:
        return 2
    return 3


def _latvian(n: int) -> int:
    if n == 0:
        return 0
    if rem(n, 10) == 1 and rem(n, 100) != 11:
        return 1
    return 2


def _polish(n: int) -> int:
    n10 = rem(n, 10)
    n100 = rem(n, 100)
    if n == 1:
        return 0
    if 2 <= n10 <= 4 and (n100 < 12 or n100 > 14):
        return 1
    return 2


def _welsh(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n in (8, 11):
        return 2
    return 3


def _romanian(n: int) -> int:
    n100 = rem(n, 100)
    if n == 1:
        return 0
    if n == 0 or 0 < n100 < 20:
        return 1
    return 2


def _arabic(n: int) -> int:
    # Zero, one, two, few (n % 100 = 3..10), many (n % 100 = 11..99), other
    n100 = rem(n, 100)
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n100 <= 10:
        return 3
    if 11 <= n100 <= 99:
        return 4
    return 5


_FAMILY_RULES: dict[PluralFamily, Callable[[int], int]] = {
    PluralFamily.DEFAULT: _always_zero,
    PluralFamily.NONE: _always_zero,
    PluralFamily.ONE_OTHER: _one_other,
    PluralFamily.ZERO_ONE_OTHER: _zero_one_other,
    PluralFamily.SLAVIC: _slavic,
    PluralFamily.CZECH: _czech,
    PluralFamily.IRISH: _irish,
    PluralFamily.LITHUANIAN: _lithuanian,
    PluralFamily.SLOVENIAN: _slovenian,
    PluralFamily.MACEDONIAN: _macedonian,
    PluralFamily.MALTESE: _maltese,
    PluralFamily.LATVIAN: _latvian,
    PluralFamily.POLISH: _polish,
    PluralFamily.WELSH: _welsh,
    PluralFamily.ROMANIAN: _romanian,
    PluralFamily.ARABIC: _arabic,
}

_FAMILY_FORMS: dict[PluralFamily, int] = {
    PluralFamily.DEFAULT: 1,
    PluralFamily.NONE: 1,
    PluralFamily.ONE_OTHER: 2,
    PluralFamily.ZERO_ONE_OTHER: 2,
    PluralFamily.SLAVIC: 3,
    PluralFamily.CZECH: 3,
    PluralFamily.IRISH: 3,
    PluralFamily.LITHUANIAN: 3,
    PluralFamily.SLOVENIAN: 4,
    PluralFamily.MACEDONIAN: 2,
    PluralFamily.MALTESE: 4,
    PluralFamily.LATVIAN: 3,
    PluralFamily.POLISH: 3,
    PluralFamily.WELSH: 4,
    PluralFamily.ROMANIAN: 3,
    PluralFamily.ARABIC: 6,
}


# =============================================================================
# Locale Table
# =============================================================================


def _build_table() -> dict[str, PluralFamily]:
    groups: dict[PluralFamily, tuple[str, ...]] = {
        PluralFamily.NONE: (
            "az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms",
            "th", "tr", "vi", "zh",
        ),
        PluralFamily.ONE_OTHER: (
            "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et",
            "eu", "fa", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu",
            "is", "it", "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl",
            "nn", "no", "om", "or", "pa", "pap", "ps", "pt", "so", "sq", "sv",
            "sw", "ta", "te", "tk", "ur", "zu",
        ),
        PluralFamily.ZERO_ONE_OTHER: (
            "am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso",
            "xbr", "ti", "wa",
        ),
        PluralFamily.SLAVIC: ("be", "bs", "hr", "ru", "sr", "uk"),
        PluralFamily.CZECH: ("cs", "sk"),
        PluralFamily.IRISH: ("ga",),
        PluralFamily.LITHUANIAN: ("lt",),
        PluralFamily.SLOVENIAN: ("sl",),
        PluralFamily.MACEDONIAN: ("mk",),
        PluralFamily.MALTESE: ("mt",),
        PluralFamily.LATVIAN: ("lv",),
        PluralFamily.POLISH: ("pl",),
        PluralFamily.WELSH: ("cy",),
        PluralFamily.ROMANIAN: ("ro",),
        PluralFamily.ARABIC: ("ar",),
    }
    table: dict[str, PluralFamily] = {}
    for family, locales in groups.items():
        for locale in locales:
            table[locale] = family
    return table


# Read-only after import
LOCALE_FAMILIES: dict[str, PluralFamily] = _build_table()


# =============================================================================
# Public API
# =============================================================================


def plural_family(locale: str) -> PluralFamily:
    """Get the plural family for a locale code.

    Args:
        locale: ISO 639-1 style code, matched exactly (``"pt"``, not
            ``"pt_BR"`` or ``"PT"``)

    Returns:
        The family, or ``PluralFamily.DEFAULT`` for unknown codes
    """
    family = LOCALE_FAMILIES.get(locale)
    if family is None:
        logger.debug("No plural rule for locale %r, using default rule", locale)
        return PluralFamily.DEFAULT
    return family


def plural_form(count: int, locale: str) -> int:
    """Get the plural-form index for ``count`` in ``locale``.

    Args:
        count: Number of items
        locale: Locale code

    Returns:
        Zero-based index into the message variants; always 0 for unknown
        locales.

    Raises:
        InvalidArgumentError: If ``count`` is not an integer.

    Example:
        >>> plural_form(1, "ru"), plural_form(2, "ru"), plural_form(11, "ru")
        (0, 1, 2)
    """
    count = ensure_count(count)
    return plural_family(locale).resolve(count)


def number_of_forms(locale: str) -> int:
    """Number of plural forms a message needs for ``locale``."""
    return plural_family(locale).forms


def supported_locales() -> list[str]:
    """Get the sorted list of locale codes with a plural rule."""
    return sorted(LOCALE_FAMILIES)


def is_supported_locale(locale: str) -> bool:
    return locale in LOCALE_FAMILIES
