"""
Validation rule implementations.

Provides validators for type coercion, numeric ranges and regex patterns.
"""

from .base_validator import BaseValidator, ValidationError
from .range_validator import RangeValidator
from .regex_validator import RegexValidator
from .type_validator import TypeValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "TypeValidator",
    "RangeValidator",
    "RegexValidator",
]
