"""
Validation system for the Android Strings Validator.

Compares every translated strings file with the base locale's file and
reports missing translations and placeholder inconsistencies.
"""

from .models import Finding, FindingKind, RuleViolation
from .config import ValidationConfig, RULE_NAMES
from .coordinator import ValidationCoordinator, validate
from .rules import (
    check_named_placeholders,
    check_positional_placeholders,
    check_potential_placeholder,
    check_newlines,
    escape_newlines,
    PAIRWISE_RULES,
    VALUE_RULES,
)
from .reporter import format_findings, format_summary, summarize_findings, exit_code

__all__ = [
    "Finding",
    "FindingKind",
    "RuleViolation",
    "ValidationConfig",
    "RULE_NAMES",
    "ValidationCoordinator",
    "validate",
    "check_named_placeholders",
    "check_positional_placeholders",
    "check_potential_placeholder",
    "check_newlines",
    "escape_newlines",
    "PAIRWISE_RULES",
    "VALUE_RULES",
    "format_findings",
    "format_summary",
    "summarize_findings",
    "exit_code",
]
