"""
Reporting for validation findings.

Numbers findings for display, builds the summary line and the process
exit code used by the command-line front end.
"""

from collections import Counter
from typing import Dict, List

from .models import Finding, FindingKind


# Highest status that survives the 8-bit truncation and stays clear of -1 (255)
MAX_EXIT_CODE = 254


def format_findings(findings: List[Finding]) -> List[str]:
    """Format findings as numbered lines: "[1] message"."""
    return [f"[{number}] {finding}" for number, finding in enumerate(findings, 1)]


def format_summary(findings: List[Finding]) -> str:
    """Final summary line of a validation run."""
    if findings:
        return f"Found {len(findings)} errors."
    return "No errors found."


def summarize_findings(findings: List[Finding]) -> Dict[str, int]:
    """Count findings per kind, including kinds with no findings."""
    counts = Counter(finding.kind for finding in findings)
    return {kind.value: counts.get(kind, 0) for kind in FindingKind}


def exit_code(findings: List[Finding]) -> int:
    """Process exit status: the number of findings capped at MAX_EXIT_CODE, 0 when everything passed."""
    return min(len(findings), MAX_EXIT_CODE)
