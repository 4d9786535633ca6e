"""
ValidationResult model representing the outcome of validating a log entry (ephemeral).
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of running the rule engine over one log entry.

    Attributes:
        line_number: Which line was validated
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Rules that failed
        error_messages: Human readable reason per failed rule
        transformations_applied: Coercions performed (e.g. "duration_days_str_to_int")
        values: Entry payload after coercion
    """

    line_number: int
    passed: bool
    passed_rules: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)
    error_messages: List[str] = Field(default_factory=list)
    transformations_applied: List[str] = Field(default_factory=list)
    values: dict[str, Any] = Field(default_factory=dict)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v
