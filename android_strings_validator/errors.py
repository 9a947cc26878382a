"""
Error handling system for the Android Strings Validator.

This module provides centralized error definitions and actionable error
messages for the structural failures that can stop a validation run:
unreadable directories and files, and malformed resource XML.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict, Any, Union
from dataclasses import dataclass


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors that can occur during validation."""
    INPUT_VALIDATION = "input_validation"
    FILE_SYSTEM = "file_system"
    DOCUMENT_PARSING = "document_parsing"


@dataclass
class ProcessingError:
    """Represents a processing error with context and guidance."""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: str
    suggested_actions: List[str]
    error_code: str
    context: Dict[str, Any] = None

    def __post_init__(self):
        if self.context is None:
            self.context = {}


class StringsValidatorError(Exception):
    """Base exception for Android Strings Validator errors."""

    def __init__(self, processing_error: ProcessingError):
        self.processing_error = processing_error
        super().__init__(processing_error.message)


class ResourceReadError(StringsValidatorError):
    """Raised when a resource directory or file cannot be read."""
    pass


class ResourceParseError(StringsValidatorError):
    """Raised when a resource file is not well-formed XML."""
    pass


class ErrorHandler:
    """
    Centralized error handling and reporting system.

    Builds ProcessingError records for structural failures and keeps
    the ones that were reported during a run.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.errors: List[ProcessingError] = []

    def add_error(self, error: ProcessingError) -> None:
        """Add an error to the collection."""
        if error.severity in [ErrorSeverity.ERROR, ErrorSeverity.CRITICAL]:
            self.errors.append(error)

        log_level = {
            ErrorSeverity.INFO: logging.INFO,
            ErrorSeverity.WARNING: logging.WARNING,
            ErrorSeverity.ERROR: logging.ERROR,
            ErrorSeverity.CRITICAL: logging.CRITICAL
        }[error.severity]

        self.logger.log(log_level, f"[{error.error_code}] {error.message}")
        if error.details:
            self.logger.log(log_level, f"Details: {error.details}")

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self.errors) > 0

    def get_error_summary(self) -> Dict[str, Any]:
        """Get a summary of all recorded errors."""
        return {
            'error_count': len(self.errors),
            'errors': [self._format_error_for_summary(e) for e in self.errors]
        }

    def _format_error_for_summary(self, error: ProcessingError) -> Dict[str, Any]:
        """Format error for summary display."""
        return {
            'code': error.error_code,
            'category': error.category.value,
            'severity': error.severity.value,
            'message': error.message,
            'suggested_actions': error.suggested_actions
        }

    def clear_errors(self) -> None:
        """Clear all recorded errors."""
        self.errors.clear()

    def validate_arguments(self, res_dir: Optional[str], strings_filename: Optional[str]) -> Optional[ProcessingError]:
        """Validate the command-line inputs that a run cannot do without."""
        if not res_dir:
            return ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Resource directory is required",
                details="No path to the Android 'res' directory was provided",
                suggested_actions=[
                    "Pass the project's resource directory with --resdir",
                    "Example: --resdir app/src/main/res"
                ],
                error_code="INPUT_001"
            )

        if not strings_filename:
            return ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Strings file name is required",
                details="An empty resource file name was provided",
                suggested_actions=[
                    "Omit --filename to use the default 'strings.xml'",
                    "Pass the XML file name only, not a path"
                ],
                error_code="INPUT_002"
            )

        return None

    def handle_read_error(self, error: OSError, path: Union[str, Path]) -> ProcessingError:
        """Handle a file system error raised while reading resources."""
        reason = error.strerror or str(error)

        if isinstance(error, FileNotFoundError):
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message=f"Cannot read {path}: {reason}",
                details=f"The resource path does not exist: {path}",
                suggested_actions=[
                    "Check that --resdir points at the Android 'res' directory",
                    "Check the base locale and file name arguments"
                ],
                error_code="FILE_001",
                context={'path': str(path)}
            )

        if isinstance(error, (PermissionError, IsADirectoryError, NotADirectoryError)):
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message=f"Cannot read {path}: {reason}",
                details=f"The resource path is not accessible: {error}",
                suggested_actions=[
                    "Check file permissions",
                    "Ensure the path points to the expected file or directory"
                ],
                error_code="FILE_002",
                context={'path': str(path)}
            )

        return ProcessingError(
            category=ErrorCategory.FILE_SYSTEM,
            severity=ErrorSeverity.ERROR,
            message=f"Cannot read {path}: {reason}",
            details=f"Unexpected I/O error: {error}",
            suggested_actions=[
                "Check that the disk and file are readable",
                "Try running the validation again"
            ],
            error_code="FILE_003",
            context={'path': str(path)}
        )

    def handle_parse_error(self, error: Exception, path: Union[str, Path]) -> ProcessingError:
        """Handle malformed resource XML."""
        return ProcessingError(
            category=ErrorCategory.DOCUMENT_PARSING,
            severity=ErrorSeverity.ERROR,
            message=f"Cannot parse {path}: {error}",
            details=f"The resource file is not well-formed XML: {error}",
            suggested_actions=[
                "Open the file in an XML-aware editor and fix the reported line",
                "Check for unescaped '&' and '<' characters in string values"
            ],
            error_code="DOC_001",
            context={'path': str(path)}
        )


# Global error handler instance
error_handler = ErrorHandler()
