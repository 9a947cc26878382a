"""
Core data models for the validation system.

Defines the findings reported by a validation run and the rule violations
they are built from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FindingKind(Enum):
    """Kinds of findings a validation run can report."""

    IO_ERROR = "io_error"
    PARSE_ERROR = "parse_error"
    MISSING_RESOURCE = "missing_resource"
    VALIDATION_FAILURE = "validation_failure"


@dataclass
class RuleViolation:
    """A single failed comparison or well-formedness rule."""

    rule: str
    message: str
    expected: Optional[str] = None
    actual: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass
class Finding:
    """One reported outcome of validation."""

    kind: FindingKind
    message: str
    file_path: Optional[str] = None
    entry_name: Optional[str] = None
    rule: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    @property
    def is_structural(self) -> bool:
        """True for unreadable or malformed files rather than content problems."""
        return self.kind in (FindingKind.IO_ERROR, FindingKind.PARSE_ERROR)
