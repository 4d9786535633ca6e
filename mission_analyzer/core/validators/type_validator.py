"""
TypeValidator - converts log text to integers.
"""

import re
from typing import Any

from .base_validator import BaseValidator, ValidationError

# Plain integer literal: optional sign followed by ASCII digits
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class TypeValidator(BaseValidator):
    """
    Validates that a field holds an integer, coercing integer text (e.g. "387" -> 387).

    Parameters:
    - expected_type: "int" (alias "integer")
    """

    SUPPORTED_TYPES = ("int", "integer")

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        expected_type = self.parameters.get("expected_type")
        if not expected_type:
            raise ValueError("TypeValidator requires 'expected_type' parameter")

        if expected_type.lower() not in self.SUPPORTED_TYPES:
            raise ValueError(f"Unsupported type: {expected_type}")

    def validate(self, value: Any, record: dict[str, Any]) -> Any:
        """
        Validate and coerce the value to int.

        Args:
            value: The field value to validate
            record: The entire entry payload

        Returns:
            The value as an int

        Raises:
            ValidationError: If the value is missing or not an integer literal
        """
        if value is None:
            raise ValidationError(
                rule_name="type_check",
                field_name=self.field_name,
                message="Value is missing"
            )

        # bool is an int subclass but never a valid integer field
        if isinstance(value, int) and not isinstance(value, bool):
            return value

        # int() alone would also accept "1_000" and surrounding whitespace
        if not isinstance(value, str) or not INTEGER_LITERAL.fullmatch(value):
            raise ValidationError(
                rule_name="type_check",
                field_name=self.field_name,
                message=f"Cannot coerce '{value}' to int: not an integer literal"
            )

        return int(value)

    @property
    def rule_type(self) -> str:
        return "type_check"
