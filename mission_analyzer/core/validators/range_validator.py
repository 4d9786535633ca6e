"""
RangeValidator - enforces an exclusive lower bound on numeric values.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError


class RangeValidator(BaseValidator):
    """
    Rejects numbers at or below a lower bound.

    Parameters:
    - min_exclusive: the value must be strictly greater than this
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.min_exclusive = self.parameters.get("min_exclusive")
        if self.min_exclusive is None:
            raise ValueError("RangeValidator requires 'min_exclusive' parameter")

    def validate(self, value: Any, record: dict[str, Any]) -> Any:
        """
        Check the value against the lower bound.

        Args:
            value: Number produced by a preceding type_check rule
            record: The entire entry payload

        Returns:
            The value unchanged

        Raises:
            ValidationError: If value is not a number or not above the bound
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValidationError(
                rule_name="range",
                field_name=self.field_name,
                message=f"Value must be numeric, got {type(value).__name__}"
            )

        if value <= self.min_exclusive:
            raise ValidationError(
                rule_name="range",
                field_name=self.field_name,
                message=f"Value {value} must be greater than {self.min_exclusive}"
            )

        return value

    @property
    def rule_type(self) -> str:
        return "range"
