"""
ProcessingStatistics model: counters accumulated during one analysis pass.
"""

from pydantic import BaseModel, Field

NO_DATA_LINES = "no data lines processed"
NO_CATEGORY_MATCHES = "no matching-category missions found"
NO_QUALIFYING_MATCHES = "matches found but none with qualifying status"
ALL_QUALIFYING_INVALID = "qualifying records found but all had invalid data"

# Counters published in the JSON report
REPORTED_COUNTERS = (
    "total_lines",
    "data_lines",
    "category_matches",
    "qualifying_matches",
    "valid_count",
    "errors",
)


class ProcessingStatistics(BaseModel):
    """
    Counters for a single run. Mutated during the pass, read-only afterwards.

    Attributes:
        total_lines: Every line read, including skipped ones
        skipped_lines: Blank, comment and metadata lines
        data_lines: Lines that were not skipped
        category_matches: Data lines whose destination matched
        qualifying_matches: Lines whose destination and status matched
        errors: Malformed lines plus rejected qualifying records
        valid_count: Records that passed every check
    """

    total_lines: int = Field(0, ge=0)
    skipped_lines: int = Field(0, ge=0)
    data_lines: int = Field(0, ge=0)
    category_matches: int = Field(0, ge=0)
    qualifying_matches: int = Field(0, ge=0)
    errors: int = Field(0, ge=0)
    valid_count: int = Field(0, ge=0)

    def failure_reason(self) -> str | None:
        """
        Explain why no valid record was found, based on the furthest stage reached.

        Returns:
            The failure message, or None if at least one record is valid
        """
        if self.valid_count > 0:
            return None
        if self.data_lines == 0:
            return NO_DATA_LINES
        if self.category_matches == 0:
            return NO_CATEGORY_MATCHES
        if self.qualifying_matches == 0:
            return NO_QUALIFYING_MATCHES
        return ALL_QUALIFYING_INVALID

    def reported(self) -> dict[str, int]:
        """Counters included in the statistics block of the JSON report."""
        return self.model_dump(include=set(REPORTED_COUNTERS))
