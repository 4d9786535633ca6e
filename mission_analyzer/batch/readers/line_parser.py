"""
Line parsing: skip rules, field splitting and normalization.
"""

from typing import Iterable

from mission_analyzer.core.models import FIELD_NAMES, LogEntry, RawLine
from mission_analyzer.core.settings import DEFAULT_SKIP_PREFIXES

DELIMITER = "|"
MIN_FIELDS = len(FIELD_NAMES)


class MalformedLineError(Exception):
    """Raised when a data line has fewer fields than a mission entry needs."""

    def __init__(self, line_number: int, field_count: int):
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(
            f"Line {line_number} has {field_count} field(s), expected at least {MIN_FIELDS}"
        )


def normalize_field(raw: str) -> str:
    """Strip leading and trailing spaces and tabs; inner whitespace is kept."""
    return raw.strip(" \t")


class LineParser:
    """
    Turns raw lines into log entries.

    Lines that are blank, comments (``#``) or start with a metadata prefix are
    skipped. Every other line is a data line and must split into at least
    eight fields; extra fields are ignored.
    """

    def __init__(self, skip_prefixes: Iterable[str] = DEFAULT_SKIP_PREFIXES):
        self.skip_prefixes = tuple(skip_prefixes)

    def is_skippable(self, text: str) -> bool:
        """Check whether a line carries no mission data."""
        trimmed = text.strip()
        return (
            not trimmed
            or trimmed.startswith("#")
            or trimmed.startswith(self.skip_prefixes)
        )

    def parse(self, line: RawLine) -> LogEntry:
        """
        Split a data line into normalized fields.

        Raises:
            MalformedLineError: If the line has fewer than eight fields
        """
        parts = line.text.split(DELIMITER)
        if len(parts) < MIN_FIELDS:
            raise MalformedLineError(line.line_number, len(parts))

        fields = {
            name: normalize_field(raw)
            for name, raw in zip(FIELD_NAMES, parts)
        }
        return LogEntry(line_number=line.line_number, fields=fields)
