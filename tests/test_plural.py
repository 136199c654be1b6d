"""Tests for locale plural-form rules."""

from __future__ import annotations

import pytest

from transchoice.exceptions import InvalidArgumentError
from transchoice.plural import (
    LOCALE_FAMILIES,
    PluralFamily,
    is_supported_locale,
    number_of_forms,
    plural_family,
    plural_form,
    supported_locales,
)


def forms(locale: str, counts: list[int]) -> list[int]:
    return [plural_form(n, locale) for n in counts]


# ==============================================================================
# Family Rules
# ==============================================================================

class TestBinaryFamilies:
    """Tests for one-form and two-form families."""

    @pytest.mark.parametrize("locale", ["ja", "zh", "ko", "tr", "vi"])
    def test_no_plural(self, locale):
        assert forms(locale, [0, 1, 2, 5, 100]) == [0, 0, 0, 0, 0]

    @pytest.mark.parametrize("locale", ["en", "de", "es", "pt", "fur", "pap"])
    def test_singular_at_one(self, locale):
        assert forms(locale, [0, 1, 2, 5]) == [1, 0, 1, 1]

    @pytest.mark.parametrize("locale", ["fr", "hi", "fil", "xbr"])
    def test_singular_at_zero_or_one(self, locale):
        assert forms(locale, [0, 1, 2, 5]) == [0, 0, 1, 1]

    def test_macedonian(self):
        assert forms("mk", [1, 11, 21, 2, 0]) == [0, 0, 0, 1, 1]


class TestSlavic:
    """Russian, Ukrainian, Serbian, Croatian, Bosnian, Belarusian."""

    def test_russian_boundaries(self):
        assert plural_form(1, "ru") == 0
        assert plural_form(2, "ru") == 1
        assert plural_form(11, "ru") == 2
        assert plural_form(21, "ru") == 0

    def test_russian_more(self):
        assert forms("ru", [0, 4, 5, 12, 14, 22, 101, 111, 112]) == [2, 1, 2, 2, 2, 1, 0, 2, 2]

    @pytest.mark.parametrize("locale", ["be", "bs", "hr", "sr", "uk"])
    def test_family_members(self, locale):
        assert forms(locale, [1, 3, 7]) == [0, 1, 2]

    def test_negative_counts_use_truncated_remainder(self):
        """-19 has remainder -9/-19, not the floored 1/81."""
        assert plural_form(-1, "ru") == 2
        assert plural_form(-19, "ru") == 2
        assert plural_form(-21, "ru") == 2


class TestWestSlavicAndBaltic:

    def test_czech_slovak(self):
        for locale in ("cs", "sk"):
            assert forms(locale, [0, 1, 2, 4, 5, 22]) == [2, 0, 1, 1, 2, 2]

    def test_polish(self):
        assert forms("pl", [0, 1, 2, 4, 5, 12, 21, 22, 112]) == [2, 0, 1, 1, 2, 2, 2, 1, 2]

    def test_lithuanian(self):
        assert forms("lt", [1, 2, 9, 10, 11, 12, 21, 22]) == [0, 1, 1, 2, 2, 2, 0, 1]

    def test_latvian(self):
        assert forms("lv", [0, 1, 21, 11, 2, 10]) == [0, 1, 1, 2, 2, 2]


class TestFourPlusFormFamilies:

    def test_irish(self):
        assert forms("ga", [1, 2, 3, 0]) == [0, 1, 2, 2]

    def test_slovenian(self):
        assert forms("sl", [1, 101, 2, 3, 4, 5, 0]) == [0, 0, 1, 2, 2, 3, 3]

    def test_maltese(self):
        assert forms("mt", [1, 0, 2, 10, 11, 19, 20, 101, 102]) == [0, 1, 1, 1, 2, 2, 3, 3, 1]

    def test_welsh(self):
        assert forms("cy", [1, 2, 8, 11, 3, 0]) == [0, 1, 2, 2, 3, 3]

    def test_romanian(self):
        assert forms("ro", [1, 0, 2, 19, 20, 101, 120]) == [0, 1, 1, 1, 2, 1, 2]

    def test_arabic(self):
        assert plural_form(0, "ar") == 0
        assert plural_form(1, "ar") == 1
        assert plural_form(2, "ar") == 2
        assert plural_form(5, "ar") == 3
        assert plural_form(15, "ar") == 4
        assert plural_form(100, "ar") == 5

    def test_arabic_uses_last_two_digits(self):
        """Counts above 100 fall back into few/many by n % 100."""
        assert forms("ar", [102, 103, 105, 111, 199, 200]) == [5, 3, 3, 4, 4, 5]

    def test_arabic_negative(self):
        assert plural_form(-5, "ar") == 5


# ==============================================================================
# Table Lookup
# ==============================================================================

class TestLocaleLookup:
    """Tests for the locale table and unknown locales."""

    @pytest.mark.parametrize("locale", ["xx", "EN", "en_US", "en-GB", ""])
    def test_unknown_locale_is_always_zero(self, locale):
        assert forms(locale, [0, 1, 2, 5, 100]) == [0, 0, 0, 0, 0]
        assert plural_family(locale) is PluralFamily.DEFAULT
        assert number_of_forms(locale) == 1

    def test_family_lookup(self):
        assert plural_family("ru") is PluralFamily.SLAVIC
        assert plural_family("ar") is PluralFamily.ARABIC
        assert plural_family("fr") is PluralFamily.ZERO_ONE_OTHER

    def test_number_of_forms(self):
        assert number_of_forms("ja") == 1
        assert number_of_forms("en") == 2
        assert number_of_forms("ru") == 3
        assert number_of_forms("sl") == 4
        assert number_of_forms("ar") == 6

    def test_supported_locales(self):
        locales = supported_locales()
        assert locales == sorted(locales)
        assert "en" in locales and "fur" in locales and "xbr" in locales
        assert is_supported_locale("pl")
        assert not is_supported_locale("pl_PL")

    def test_rule_is_total_and_within_forms(self):
        """Every locale yields a valid index for negative, zero and large counts."""
        for locale, family in LOCALE_FAMILIES.items():
            for n in range(-150, 250):
                index = plural_form(n, locale)
                assert 0 <= index < family.forms, (locale, n, index)

    @pytest.mark.parametrize("count", [1.0, "1", True, None])
    def test_count_must_be_int(self, count):
        with pytest.raises(InvalidArgumentError):
            plural_form(count, "en")
