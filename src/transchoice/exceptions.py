"""Exception hierarchy for transchoice.

All errors raised by the library derive from :class:`TransChoiceError`.
Each concrete error also derives from the closest built-in exception so
callers that only know about ``ValueError``/``TypeError``/``IndexError``
keep working.
"""

from __future__ import annotations

from typing import Any


class TransChoiceError(Exception):
    """Base exception for all transchoice errors."""

    pass


# =============================================================================
# Input Errors
# =============================================================================


class InvalidIntervalError(TransChoiceError, ValueError):
    """Raised when an interval expression is malformed or not a string."""

    def __init__(self, interval: Any, reason: str | None = None) -> None:
        self.interval = interval
        self.reason = reason
        if not isinstance(interval, str):
            message = "Invalid interval: should be a string."
        elif reason:
            message = f"Invalid interval: {interval} ({reason})"
        else:
            message = f"Invalid interval: {interval}"
        super().__init__(message)


class InvalidArgumentError(TransChoiceError, TypeError):
    """Raised when an argument has an unusable type or value."""

    def __init__(self, argument: str, value: Any, expected: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"Invalid {argument}: expected {expected}, got {type(value).__name__} ({value!r})"
        )


class PluralFormError(TransChoiceError, IndexError):
    """Raised when the plural-form index points past the available variants."""

    def __init__(self, index: int, variants: int, locale: str) -> None:
        self.index = index
        self.variants = variants
        self.locale = locale
        super().__init__(
            f"Plural form {index} for locale '{locale}' is out of range "
            f"for a message with {variants} variants"
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(TransChoiceError):
    """Base configuration error."""

    pass


class ConfigSourceError(ConfigError):
    """Configuration source could not be read or parsed."""

    pass
