"""
Mission log readers and line parsing.
"""

from .line_parser import LineParser, MalformedLineError, normalize_field
from .log_reader import MissionLogReader

__all__ = [
    "LineParser",
    "MalformedLineError",
    "MissionLogReader",
    "normalize_field",
]
