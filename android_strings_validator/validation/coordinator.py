"""
Validation coordinator that orchestrates validation of every locale's strings file.

Loads the base locale's resources, discovers the other locales' files and
compares each of them against the base, collecting findings in order.
"""

import logging
from pathlib import Path
from typing import List, Union

from .models import Finding, FindingKind, RuleViolation
from .config import ValidationConfig
from .rules import PAIRWISE_RULES, VALUE_RULES
from ..config import Config
from ..errors import ErrorHandler, StringsValidatorError, ResourceParseError
from ..models import ResourceDocument
from ..resources import (
    parse_resources,
    parse_resources_file,
    find_other_strings_files,
    extract_short_path,
)


class ValidationCoordinator:
    """
    Orchestrates validation of translated strings files against the base locale.

    The coordinator is responsible for:
    - Loading the base resources and discovering the other locales' files
    - Running the comparison rules on every string, string array and plural
    - Turning unreadable or malformed files into findings instead of raising
    """

    def __init__(self, config: ValidationConfig = None, error_handler: ErrorHandler = None):
        """Initialize the validation coordinator."""
        self.config = config or ValidationConfig()
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logging.getLogger(__name__)

    def validate(
        self,
        res_dir: Union[str, Path],
        base_locale: str = "",
        strings_filename: str = Config.DEFAULT_STRINGS_FILENAME,
    ) -> List[Finding]:
        """
        Validate all strings files inside `res_dir` against the base locale's file.

        The base locale's file is not validated itself. A failure to read the
        base file or the directory stops the run with a single finding; a
        failure to read any other file is reported and that file is skipped.

        Args:
            res_dir: Path to the Android 'res' directory
            base_locale: Locale used as the reference ("" for values/)
            strings_filename: Name of the XML strings file

        Returns:
            List[Finding]: Findings in file order, then rule order
        """
        self.logger.info(
            f"Validating {strings_filename} in {res_dir} against base locale "
            f"'{base_locale or Config.VALUES_DIR_NAME}'"
        )

        try:
            base_resources = parse_resources(res_dir, base_locale, strings_filename)
        except StringsValidatorError as e:
            return [self._structural_finding(e)]

        try:
            paths = find_other_strings_files(res_dir, base_locale, strings_filename)
        except StringsValidatorError as e:
            return [self._structural_finding(e)]

        findings: List[Finding] = []
        for path in paths:
            try:
                resources = parse_resources_file(path)
            except StringsValidatorError as e:
                findings.append(self._structural_finding(e))
                continue

            short_path = extract_short_path(res_dir, path)
            file_findings = self.validate_document(base_resources, resources, short_path)
            self.logger.debug(f"{short_path}: {len(file_findings)} finding(s)")
            findings.extend(file_findings)

        self.logger.info(f"Validated {len(paths)} file(s): {len(findings)} finding(s)")
        return findings

    def validate_document(
        self, base: ResourceDocument, translated: ResourceDocument, short_path: str
    ) -> List[Finding]:
        """
        Compare one translated document with the base document.

        Args:
            base: Resources of the base locale, expected to be error free
            translated: Resources being validated
            short_path: Display path of the translated file

        Returns:
            List[Finding]: Findings for this document only
        """
        findings = []
        findings.extend(self._check_base_values(base, translated, short_path))
        findings.extend(self._check_strings(base, translated, short_path))
        findings.extend(self._check_string_arrays(base, translated, short_path))
        findings.extend(self._check_plurals(translated, short_path))
        if self.config.report_duplicates:
            findings.extend(self._check_duplicates(translated, short_path))
        return findings

    def _check_base_values(self, base, translated, short_path):
        """Translated strings that no longer exist in the base file."""
        findings = []
        for entry in translated.strings:
            if base.find_string(entry.name) is None:
                findings.append(Finding(
                    kind=FindingKind.VALIDATION_FAILURE,
                    message=f"{entry.name} in {short_path} does not have a base value.",
                    file_path=short_path,
                    entry_name=entry.name,
                ))
        return findings

    def _check_strings(self, base, translated, short_path):
        findings = []
        for base_entry in base.strings:
            entry = translated.find_string(base_entry.name)
            if entry is None:
                findings.extend(self._missing(base_entry.name, short_path))
                continue
            findings.extend(
                self._apply_rules(base_entry.name, short_path, base_entry.value, entry.value)
            )
        return findings

    def _check_string_arrays(self, base, translated, short_path):
        findings = []
        for base_entry in base.string_arrays:
            entry = translated.find_string_array(base_entry.name)
            if entry is None:
                findings.extend(self._missing(base_entry.name, short_path))
                continue

            if len(entry.items) != len(base_entry.items):
                findings.append(Finding(
                    kind=FindingKind.VALIDATION_FAILURE,
                    message=(
                        f"{entry.name} array in {short_path} has {len(entry.items)} items, "
                        f"but it should have {len(base_entry.items)}"
                    ),
                    file_path=short_path,
                    entry_name=entry.name,
                ))
                continue

            for base_item, item in zip(base_entry.items, entry.items):
                findings.extend(self._apply_rules(base_entry.name, short_path, base_item, item))
        return findings

    def _check_plurals(self, translated, short_path):
        """Plurals are checked on their own; quantities differ between languages."""
        findings = []
        for entry in translated.plurals:
            for item in entry.items:
                findings.extend(self._apply_value_rules(entry.name, short_path, item.value))
        return findings

    def _check_duplicates(self, translated, short_path):
        findings = []
        for kind, names in translated.duplicate_names().items():
            for name, count in names.items():
                findings.append(Finding(
                    kind=FindingKind.VALIDATION_FAILURE,
                    message=(
                        f"{name} in {short_path} is defined {count} times; "
                        f"only the first definition is validated"
                    ),
                    file_path=short_path,
                    entry_name=name,
                    rule=f"duplicate_{kind.replace('-', '_')}",
                ))
        return findings

    def _missing(self, name: str, short_path: str) -> List[Finding]:
        if not self.config.show_missing:
            return []
        return [Finding(
            kind=FindingKind.MISSING_RESOURCE,
            message=f"[missing] element named {name} in {short_path}",
            file_path=short_path,
            entry_name=name,
        )]

    def _apply_rules(self, name: str, short_path: str, base_value: str, value: str) -> List[Finding]:
        """Run all pairwise rules, then all value rules, on one translated value."""
        findings = []
        for rule_name, rule in PAIRWISE_RULES:
            if not self.config.is_rule_enabled(rule_name):
                continue
            violation = rule(base_value, value)
            if violation is not None:
                findings.append(self._violation_finding(name, short_path, violation))
        findings.extend(self._apply_value_rules(name, short_path, value))
        return findings

    def _apply_value_rules(self, name: str, short_path: str, value: str) -> List[Finding]:
        findings = []
        for rule_name, rule in VALUE_RULES:
            if not self.config.is_rule_enabled(rule_name):
                continue
            violation = rule(value)
            if violation is not None:
                findings.append(self._violation_finding(name, short_path, violation))
        return findings

    def _violation_finding(self, name: str, short_path: str, violation: RuleViolation) -> Finding:
        return Finding(
            kind=FindingKind.VALIDATION_FAILURE,
            message=f"{name} in {short_path}: {violation}",
            file_path=short_path,
            entry_name=name,
            rule=violation.rule,
        )

    def _structural_finding(self, error: StringsValidatorError) -> Finding:
        """Record an unreadable or malformed file and turn it into a finding."""
        self.error_handler.add_error(error.processing_error)
        kind = FindingKind.PARSE_ERROR if isinstance(error, ResourceParseError) else FindingKind.IO_ERROR
        return Finding(
            kind=kind,
            message=str(error),
            file_path=error.processing_error.context.get("path"),
        )


def validate(
    res_dir: Union[str, Path],
    base_locale: str = "",
    strings_filename: str = Config.DEFAULT_STRINGS_FILENAME,
    show_missing: bool = False,
) -> List[Finding]:
    """
    Validate the string resources inside `res_dir`.

    The strings file of `base_locale` is not validated, only used for
    comparison. Base entries without a translation are reported only when
    `show_missing` is true.
    """
    coordinator = ValidationCoordinator(ValidationConfig(show_missing=show_missing))
    return coordinator.validate(res_dir, base_locale, strings_filename)
