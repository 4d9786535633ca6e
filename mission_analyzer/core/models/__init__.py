"""
Core data models for the mission log analyzer.

All models use Pydantic for runtime validation and type safety.
"""

from .log_entry import FIELD_NAMES, LogEntry, RawLine
from .mission_record import SECURITY_CODE_PATTERN, MissionRecord, RankedMission
from .processing_statistics import ProcessingStatistics
from .validation_result import ValidationResult

__all__ = [
    "FIELD_NAMES",
    "SECURITY_CODE_PATTERN",
    "RawLine",
    "LogEntry",
    "MissionRecord",
    "RankedMission",
    "ProcessingStatistics",
    "ValidationResult",
]
