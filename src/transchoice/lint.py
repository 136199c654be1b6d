"""Static checks for message templates.

Finds problems that would otherwise surface only when a particular count
is resolved at runtime: malformed rules, or too few variants for the
locale's plural forms.

Usage:
    from transchoice.lint import lint_message

    for issue in lint_message("яблоко|яблока", "ru"):
        print(issue)
    # error[missing_forms]: locale 'ru' uses 3 plural forms but the message has 2 variants
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from transchoice.exceptions import InvalidIntervalError
from transchoice.interval import parse_interval
from transchoice.message import split_message
from transchoice.plural import is_supported_locale, number_of_forms

__all__ = ["Severity", "LintIssue", "lint_message", "has_errors"]


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LintIssue:
    """A problem found in a template.

    Attributes:
        severity: ERROR when resolution can fail, WARNING otherwise
        code: Stable identifier, e.g. ``missing_forms``
        message: Human-readable description
        variant: Index of the offending variant, if any
    """

    severity: Severity
    code: str
    message: str
    variant: int | None = None

    def __str__(self) -> str:
        where = f" (variant {self.variant})" if self.variant is not None else ""
        return f"{self.severity.value}[{self.code}]{where}: {self.message}"

    def to_dict(self) -> dict[str, object]:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "variant": self.variant,
        }


def lint_message(message: str, locale: str = "en") -> list[LintIssue]:
    """Check a template against a locale.

    Args:
        message: Message template
        locale: Locale whose plural forms the template must cover

    Returns:
        Issues in the order found; empty when the template is clean.
    """
    issues: list[LintIssue] = []

    if not is_supported_locale(locale):
        issues.append(LintIssue(
            Severity.WARNING,
            "unknown_locale",
            f"no plural rule for locale '{locale}'; the first variant is always used",
        ))

    variants = split_message(message)
    if len(variants) == 1:
        return issues

    for index, variant in enumerate(variants):
        if variant.rule is not None:
            try:
                parse_interval(variant.rule)
            except InvalidIntervalError as e:
                issues.append(LintIssue(Severity.ERROR, "invalid_interval", str(e), index))
        if not variant.text:
            issues.append(LintIssue(Severity.WARNING, "empty_variant", "variant has no text", index))

    forms = number_of_forms(locale)
    if len(variants) < forms:
        issues.append(LintIssue(
            Severity.ERROR,
            "missing_forms",
            f"locale '{locale}' uses {forms} plural forms but the message has {len(variants)} variants",
        ))
    else:
        extra = variants[forms:]
        if any(not variant.has_rule for variant in extra):
            issues.append(LintIssue(
                Severity.WARNING,
                "unused_variants",
                f"locale '{locale}' uses {forms} plural forms; variants past index "
                f"{forms - 1} are only reachable through explicit rules",
            ))

    return issues


def has_errors(issues: list[LintIssue]) -> bool:
    return any(issue.severity is Severity.ERROR for issue in issues)
