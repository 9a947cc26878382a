"""
Comparison rules for translated string values.

Pairwise rules compare a translated value with its base value; value rules
check a single translated value on its own. Every rule returns None when the
value passes, or a RuleViolation describing the first problem found.
"""

import re
from typing import Callable, Optional, Tuple

from .models import RuleViolation


NAMED_PLACEHOLDER_RE = re.compile(r"%[a-zA-Z]")
POSITIONAL_PLACEHOLDER_RE = re.compile(r"%[0-9]+\$[a-zA-Z]")
POTENTIAL_PLACEHOLDER_RE = re.compile(r"%\s")
NEWLINE_RE = re.compile(r"\n")

PairwiseRule = Callable[[str, str], Optional[RuleViolation]]
ValueRule = Callable[[str], Optional[RuleViolation]]


def escape_newlines(value: str) -> str:
    """Show embedded newlines as the two characters '\\n'."""
    return NEWLINE_RE.sub(r"\\n", value)


def _count_mismatch(rule: str, base_count: int, target_count: int) -> RuleViolation:
    return RuleViolation(
        rule=rule,
        message=(
            f"The target string has {target_count} placeholder(s), "
            f"while it should probably have {base_count}"
        ),
        expected=str(base_count),
        actual=str(target_count),
    )


def check_named_placeholders(base_value: str, value: str) -> Optional[RuleViolation]:
    """
    Compare %s-style placeholders of `value` with those of `base_value`.

    Placeholders must appear in the same number and in the same order.
    """
    base_matches = NAMED_PLACEHOLDER_RE.findall(base_value)
    target_matches = NAMED_PLACEHOLDER_RE.findall(value)
    if not base_matches and not target_matches:
        return None
    if len(base_matches) != len(target_matches):
        return _count_mismatch("named_placeholders", len(base_matches), len(target_matches))

    for index, (expected, actual) in enumerate(zip(base_matches, target_matches)):
        if expected != actual:
            return RuleViolation(
                rule="named_placeholders",
                message=(
                    f"The target string placeholder #{index} is {actual}, "
                    f"while it probably should be {expected}"
                ),
                expected=expected,
                actual=actual,
            )
    return None


def check_positional_placeholders(base_value: str, value: str) -> Optional[RuleViolation]:
    """
    Compare %1$s-style placeholders of `value` with those of `base_value`.

    Counts must match and every base placeholder must occur somewhere in
    the translation; the order is free since the index selects the argument.
    """
    base_matches = POSITIONAL_PLACEHOLDER_RE.findall(base_value)
    target_matches = POSITIONAL_PLACEHOLDER_RE.findall(value)
    if not base_matches and not target_matches:
        return None
    if len(base_matches) != len(target_matches):
        return _count_mismatch("positional_placeholders", len(base_matches), len(target_matches))

    for index, expected in enumerate(base_matches):
        if expected not in target_matches:
            return RuleViolation(
                rule="positional_placeholders",
                message=(
                    f"The target string placeholder #{index} was not found, "
                    f"while it probably should be {expected}"
                ),
                expected=expected,
                actual=None,
            )
    return None


def check_potential_placeholder(value: str) -> Optional[RuleViolation]:
    """Flag a '%' followed by whitespace, which looks like a broken placeholder."""
    if POTENTIAL_PLACEHOLDER_RE.search(value):
        return RuleViolation(
            rule="potential_placeholder",
            message=f"Value '{escape_newlines(value)}' has a potential placeholder",
            actual=value,
        )
    return None


def check_newlines(value: str) -> Optional[RuleViolation]:
    """Flag raw newline characters; Android strings should use the \\n escape instead."""
    if NEWLINE_RE.search(value):
        return RuleViolation(
            rule="newline",
            message=f"The following line must not have a newline character: '{escape_newlines(value)}'",
            actual=value,
        )
    return None


# Rules run in this order for every translated value
PAIRWISE_RULES: Tuple[Tuple[str, PairwiseRule], ...] = (
    ("named_placeholders", check_named_placeholders),
    ("positional_placeholders", check_positional_placeholders),
)

VALUE_RULES: Tuple[Tuple[str, ValueRule], ...] = (
    ("potential_placeholder", check_potential_placeholder),
    ("newline", check_newlines),
)
