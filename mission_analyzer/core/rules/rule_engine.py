"""
Rule engine for orchestrating validation rules on log entries.

The rule engine builds validators from rule configurations, applies them to
an entry's fields in order, and produces a validation result.
"""

from typing import Any

from mission_analyzer.core.models import LogEntry, ValidationResult
from mission_analyzer.core.validators import (
    BaseValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    ValidationError,
)


class RuleEngine:
    """
    Orchestrates validation rules on log entries.

    Each validator receives the value left by the previous rule for the same
    field, so a type_check rule can coerce text before a range rule
    inspects it. With fail_fast enabled (the default) evaluation stops at
    the first failing rule.
    """

    VALIDATOR_REGISTRY = {
        "type_check": TypeValidator,
        "range": RangeValidator,
        "regex": RegexValidator,
    }

    def __init__(self, rules: list[dict[str, Any]], fail_fast: bool = True):
        """
        Initialize the rule engine with validation rules.

        Args:
            rules: List of rule configurations, each containing:
                   - rule_name: str
                   - rule_type: str (type_check, range, regex)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional)
                   - enabled: bool (default True)
            fail_fast: Stop at the first failing rule
        """
        self.rules = rules
        self.fail_fast = fail_fast
        self.validators: list[tuple[str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_name = rule["rule_name"]
            rule_type = rule["rule_type"]
            field_name = rule["field_name"]
            parameters = rule.get("parameters", {})

            validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            try:
                validator = validator_class(field_name, parameters)
            except ValueError as e:
                raise ValueError(f"Failed to create validator for rule '{rule_name}': {e}")
            self.validators.append((rule_name, validator))

    def validate_entry(self, entry: LogEntry) -> ValidationResult:
        """
        Validate a log entry against all rules.

        Args:
            entry: The LogEntry to validate

        Returns:
            ValidationResult with pass/fail status and the coerced values
        """
        passed_rules = []
        failed_rules = []
        error_messages = []
        transformations = []

        values: dict[str, Any] = dict(entry.fields)

        for rule_name, validator in self.validators:
            field_name = validator.field_name
            value = values.get(field_name)

            try:
                new_value = validator.validate(value, values)
            except ValidationError as e:
                failed_rules.append(rule_name)
                error_messages.append(e.message)
                if self.fail_fast:
                    break
                continue

            passed_rules.append(rule_name)
            if type(new_value) is not type(value):
                transformations.append(
                    f"{field_name}_{type(value).__name__}_to_{type(new_value).__name__}"
                )
            values[field_name] = new_value

        return ValidationResult(
            line_number=entry.line_number,
            passed=not failed_rules,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            error_messages=error_messages,
            transformations_applied=transformations,
            values=values,
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts and types
        """
        counts: dict[str, int] = {}
        for _, validator in self.validators:
            counts[validator.rule_type] = counts.get(validator.rule_type, 0) + 1

        return {
            "total_rules": len(self.validators),
            "rules_by_type": counts,
        }
