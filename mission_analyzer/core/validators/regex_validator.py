"""
RegexValidator - validates field values against a regular expression pattern.
"""

import re
from typing import Any

from .base_validator import BaseValidator, ValidationError


class RegexValidator(BaseValidator):
    """
    Validates that a field value matches a regular expression pattern.

    The pattern must match the whole value, case-sensitively.

    Parameters:
    - pattern: Regular expression pattern
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        pattern = self.parameters.get("pattern")
        if not pattern:
            raise ValueError("RegexValidator requires 'pattern' parameter")

        try:
            self.pattern = re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

    def validate(self, value: Any, record: dict[str, Any]) -> Any:
        """
        Validate that the value matches the regex pattern.

        Args:
            value: The field value to validate
            record: The entire entry payload

        Returns:
            The value unchanged

        Raises:
            ValidationError: If value is missing or doesn't match the pattern
        """
        if value is None:
            raise ValidationError(
                rule_name="regex",
                field_name=self.field_name,
                message="Value is missing"
            )

        value_str = value if isinstance(value, str) else str(value)

        if not self.pattern.fullmatch(value_str):
            raise ValidationError(
                rule_name="regex",
                field_name=self.field_name,
                message=f"Value '{value_str}' does not match pattern '{self.pattern.pattern}'"
            )

        return value

    @property
    def rule_type(self) -> str:
        return "regex"
