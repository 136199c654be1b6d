"""Choosing the plural or singular variant of a message.

Resolution order for a template with more than one variant:

1. Variants carrying an explicit interval rule, in template order; the
   first rule containing the count wins.
2. The locale's plural-form index into the variant list.

A template with a single variant is returned verbatim.

Placeholder substitution is not applied by default: the selected text is
returned as written, ``:count`` included. Pass ``apply_replacements=True``
(or set it in :class:`~transchoice.config.TransChoiceConfig`) to substitute
placeholders in every resolved message.

Usage:
    from transchoice import Translator, trans_choice

    trans_choice("apple|apples", 5)                       # "apples"
    trans_choice("{0} none|[1,Inf] :count items", 3,
                 apply_replacements=True)                 # "3 items"

    translator = Translator(TransChoiceConfig(default_locale="ru"))
    translator.trans_choice("яблоко|яблока|яблок", 5)     # "яблок"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from transchoice.config import TransChoiceConfig
from transchoice.exceptions import PluralFormError
from transchoice.interval import test_interval
from transchoice.message import split_message
from transchoice.plural import plural_form
from transchoice.replacements import apply_replacements as _apply_replacements
from transchoice.utils import ensure_count, ensure_text

logger = logging.getLogger(__name__)

__all__ = [
    "ChoiceSource",
    "Choice",
    "Translator",
    "get_translator",
    "trans_choice",
]


class ChoiceSource(str, Enum):
    """How a variant was selected."""

    SINGLE = "single"        # Template had one variant
    EXPLICIT = "explicit"    # An interval rule matched
    PLURAL = "plural"        # Locale plural-form index


@dataclass(frozen=True)
class Choice:
    """The outcome of variant selection.

    Attributes:
        text: Selected text, before placeholder substitution
        index: Position of the variant in the template
        source: How the variant was selected
        rule: Matching interval rule for explicit choices
        locale: Locale used for plural choices
    """

    text: str
    index: int
    source: ChoiceSource
    rule: str | None = None
    locale: str | None = None


class Translator:
    """Resolves pluralized message templates.

    Instances hold an immutable configuration and no other state, so one
    translator can be shared freely.

    Example:
        translator = Translator()
        translator.trans_choice("{0} No files|{1} One file|[2,*] Files", 0)
        # -> "No files"
    """

    def __init__(self, config: TransChoiceConfig | None = None) -> None:
        self._config = config or TransChoiceConfig()

    @property
    def config(self) -> TransChoiceConfig:
        return self._config

    def choose(self, message: str, count: int, locale: str | None = None) -> Choice:
        """Select the variant of ``message`` for ``count``.

        Args:
            message: Message template
            count: Number of items
            locale: Locale code; the configured default when empty

        Returns:
            The selected variant and how it was found

        Raises:
            InvalidArgumentError: If ``message`` is not a string or ``count``
                is not an integer.
            InvalidIntervalError: If a variant carries a malformed rule.
            PluralFormError: If the locale needs more variants than the
                template has.
        """
        message = ensure_text("message", message)
        count = ensure_count(count)

        variants = split_message(message)
        if len(variants) == 1:
            return Choice(message, 0, ChoiceSource.SINGLE)

        for index, variant in enumerate(variants):
            if variant.rule is not None and test_interval(count, variant.rule):
                logger.debug("Count %d matched rule %s (variant %d)", count, variant.rule, index)
                return Choice(variant.text, index, ChoiceSource.EXPLICIT, rule=variant.rule)

        locale = locale or self._config.default_locale
        index = plural_form(count, locale)
        if index >= len(variants):
            raise PluralFormError(index, len(variants), locale)

        logger.debug("Count %d resolved to plural form %d for locale %r", count, index, locale)
        return Choice(variants[index].text, index, ChoiceSource.PLURAL, locale=locale)

    def trans_choice(
        self,
        message: str,
        count: int,
        replacements: Mapping[str, Any] | None = None,
        locale: str | None = None,
        *,
        apply_replacements: bool | None = None,
    ) -> str:
        """Get the plural or singular form of a message for ``count``.

        Args:
            message: Message template
            count: Number of items
            replacements: Placeholder values; ``count`` is always set to
                ``count``. The mapping passed in is not modified.
            locale: Locale code; the configured default when empty
            apply_replacements: Substitute placeholders in the result.
                Defaults to the configured value (off unless enabled).

        Returns:
            The selected message text
        """
        choice = self.choose(message, count, locale)

        if apply_replacements is None:
            apply_replacements = self._config.apply_replacements
        if not apply_replacements:
            return choice.text

        values = dict(replacements or {})
        values["count"] = count
        return _apply_replacements(choice.text, values)

    def selection_label(
        self,
        names: Sequence[str],
        message: str,
        locale: str | None = None,
    ) -> str:
        """Label for a selection of named items, such as picked files.

        A single item is shown by name. Any other number of items uses the
        pluralized ``message`` with placeholders substituted.

        Example:
            translator.selection_label(["a.txt"], ":count files")   # "a.txt"
            translator.selection_label(["a", "b"], "{0} None|[1,Inf] :count files")
            # -> "2 files"
        """
        if len(names) == 1:
            return names[0]
        return self.trans_choice(message, len(names), locale=locale, apply_replacements=True)


_default_translator = Translator()


def get_translator() -> Translator:
    """Get the shared translator built from default configuration."""
    return _default_translator


def trans_choice(
    message: str,
    count: int,
    replacements: Mapping[str, Any] | None = None,
    locale: str | None = None,
    *,
    apply_replacements: bool | None = None,
) -> str:
    """Resolve ``message`` for ``count`` with the shared translator.

    See :meth:`Translator.trans_choice`.
    """
    return _default_translator.trans_choice(
        message,
        count,
        replacements,
        locale,
        apply_replacements=apply_replacements,
    )
