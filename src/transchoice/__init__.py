"""transchoice - Locale-aware plural variant selection for message templates.

Templates hold variants separated by ``|``, optionally prefixed with an
explicit interval rule::

    "apple|apples"
    "{0} There are none|[1,19] There are some|[20,*] There are many"

Example:
    from transchoice import trans_choice, apply_replacements

    trans_choice("apple|apples", 1, locale="en")          # "apple"
    trans_choice("яблоко|яблока|яблок", 21, locale="ru")  # "яблоко"

    text = trans_choice("{0} No files|[1,*] :count files", 4)
    apply_replacements(text, {"count": 4})                # "4 files"
"""

from transchoice.config import DEFAULT_LOCALE, TransChoiceConfig, load_config
from transchoice.exceptions import (
    ConfigError,
    ConfigSourceError,
    InvalidArgumentError,
    InvalidIntervalError,
    PluralFormError,
    TransChoiceError,
)
from transchoice.interval import (
    Interval,
    RangeForm,
    SetForm,
    parse_interval,
    search_interval,
    test_interval,
)
from transchoice.lint import LintIssue, Severity, has_errors, lint_message
from transchoice.message import Variant, is_single_variant, split_message
from transchoice.plural import (
    LOCALE_FAMILIES,
    PluralFamily,
    is_supported_locale,
    number_of_forms,
    plural_family,
    plural_form,
    supported_locales,
)
from transchoice.replacements import apply_replacements, sort_replacement_keys
from transchoice.translator import (
    Choice,
    ChoiceSource,
    Translator,
    get_translator,
    trans_choice,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DEFAULT_LOCALE",
    "TransChoiceConfig",
    "load_config",
    # Errors
    "TransChoiceError",
    "InvalidIntervalError",
    "InvalidArgumentError",
    "PluralFormError",
    "ConfigError",
    "ConfigSourceError",
    # Intervals
    "Interval",
    "SetForm",
    "RangeForm",
    "parse_interval",
    "search_interval",
    "test_interval",
    # Templates
    "Variant",
    "split_message",
    "is_single_variant",
    # Plural rules
    "PluralFamily",
    "LOCALE_FAMILIES",
    "plural_form",
    "plural_family",
    "number_of_forms",
    "supported_locales",
    "is_supported_locale",
    # Placeholders
    "apply_replacements",
    "sort_replacement_keys",
    # Translation
    "Choice",
    "ChoiceSource",
    "Translator",
    "get_translator",
    "trans_choice",
    # Lint
    "LintIssue",
    "Severity",
    "lint_message",
    "has_errors",
]
