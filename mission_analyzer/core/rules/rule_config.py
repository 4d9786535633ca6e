"""
Rule configuration management.

Builds the rule dictionaries consumed by RuleEngine. Each rule is a plain
dictionary so that rule sets can also come from configuration files:

    {
        "rule_name": "duration_days_range",
        "rule_type": "range",
        "field_name": "duration_days",
        "parameters": {"min_exclusive": 0},
        "enabled": True,
    }
"""

from typing import Any

from mission_analyzer.core.models.mission_record import SECURITY_CODE_PATTERN


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.

    Rules are kept in the order they are added; the engine evaluates them
    in that order.
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[dict[str, Any]] = []

    def _add(self, rule_name: str, rule_type: str, field_name: str, parameters: dict[str, Any]) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "enabled": True,
        })
        return self

    def add_type_check(self, field_name: str, expected_type: str = "int") -> "RuleConfigBuilder":
        """Add a type check rule."""
        return self._add(
            f"{field_name}_type_check",
            "type_check",
            field_name,
            {"expected_type": expected_type},
        )

    def add_range(self, field_name: str, min_exclusive: float) -> "RuleConfigBuilder":
        """Add a lower-bound rule."""
        return self._add(f"{field_name}_range", "range", field_name, {"min_exclusive": min_exclusive})

    def add_regex(self, field_name: str, pattern: str) -> "RuleConfigBuilder":
        """Add a regex validation rule."""
        return self._add(f"{field_name}_regex", "regex", field_name, {"pattern": pattern})

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return list(self.rules)


def default_mission_rules() -> list[dict[str, Any]]:
    """
    Deep validation applied to qualifying entries.

    Duration is checked before the security code, so an entry failing both
    is reported once, as an invalid duration.
    """
    return RuleConfigBuilder() \
        .add_type_check("duration_days", "int") \
        .add_range("duration_days", min_exclusive=0) \
        .add_regex("security_code", SECURITY_CODE_PATTERN) \
        .build()
