"""
Configuration system for the validation framework.

Controls which findings are reported and which comparison rules run.
"""

from dataclasses import dataclass
from typing import Dict, Any


RULE_NAMES = (
    "named_placeholders",
    "positional_placeholders",
    "potential_placeholder",
    "newline",
)


@dataclass
class ValidationConfig:
    """Configuration for the validation system."""

    # Report base entries that have no translation
    show_missing: bool = False

    # Report names defined more than once in a translated file
    report_duplicates: bool = False

    # Rule configuration
    enabled_rules: Dict[str, bool] = None

    def __post_init__(self):
        """Enable every rule unless told otherwise."""
        if self.enabled_rules is None:
            self.enabled_rules = self._get_default_rules()

    def _get_default_rules(self) -> Dict[str, bool]:
        return {name: True for name in RULE_NAMES}

    def is_rule_enabled(self, rule_name: str) -> bool:
        """Check if a specific rule is enabled."""
        return self.enabled_rules.get(rule_name, True)

    def disable_rule(self, rule_name: str) -> None:
        """Disable a single rule by name."""
        if rule_name not in RULE_NAMES:
            raise ValueError(f"Unknown rule: {rule_name}")
        self.enabled_rules[rule_name] = False

    def get_config_summary(self) -> Dict[str, Any]:
        """Get a summary of current configuration."""
        return {
            "show_missing": self.show_missing,
            "report_duplicates": self.report_duplicates,
            "enabled_rules": dict(self.enabled_rules),
        }

