"""
RawLine and LogEntry models for lines moving through a single pass (ephemeral).
"""

from pydantic import BaseModel, Field

# Logical field order of a mission log line
FIELD_NAMES = (
    "date",
    "mission_id",
    "destination",
    "status",
    "crew_size",
    "duration_days",
    "success_rate",
    "security_code",
)


class RawLine(BaseModel):
    """
    One line of input text with its 1-based position in the source.

    The line terminator is already removed. A line whose bytes could not be
    decoded has empty text and the decoder message in decode_error.
    """

    line_number: int = Field(..., ge=1)
    text: str
    decode_error: str | None = None


class LogEntry(BaseModel):
    """
    A candidate data line after splitting on the delimiter and normalizing fields.

    Attributes:
        line_number: 1-based position in the input
        fields: Normalized text keyed by the names in FIELD_NAMES
    """

    line_number: int = Field(..., ge=1)
    fields: dict[str, str]

    @property
    def destination(self) -> str:
        return self.fields["destination"]

    @property
    def status(self) -> str:
        return self.fields["status"]

    class Config:
        json_schema_extra = {
            "example": {
                "line_number": 12,
                "fields": {
                    "date": "2045-07-12",
                    "mission_id": "KLM-1234",
                    "destination": "Mars",
                    "status": "Completed",
                    "crew_size": "5",
                    "duration_days": "387",
                    "success_rate": "98.7",
                    "security_code": "TRX-842-YHG"
                }
            }
        }
