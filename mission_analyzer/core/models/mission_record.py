"""
MissionRecord model representing a validated mission entry.
"""

from typing import Any

from pydantic import BaseModel, Field

SECURITY_CODE_PATTERN = r"^[A-Z]{3}-[0-9]{3}-[A-Z]{3}$"


class MissionRecord(BaseModel):
    """
    A qualifying mission that passed duration and security-code validation.

    Immutable once built. crew_size and success_rate are carried through
    as text exactly as they appeared in the log.

    Attributes:
        date: Mission date (not semantically validated)
        mission_id: Mission identifier
        destination: Destination as written in the log
        status: Status as written in the log
        crew_size: Crew size text
        duration_days: Mission length in days, always positive
        success_rate: Success rate text
        security_code: Code in AAA-999-AAA form
        source_line_number: 1-based line the record was read from
    """

    date: str
    mission_id: str
    destination: str
    status: str
    crew_size: str
    duration_days: int = Field(..., gt=0)
    success_rate: str
    security_code: str = Field(..., pattern=SECURITY_CODE_PATTERN)
    source_line_number: int = Field(..., ge=1)

    @classmethod
    def from_values(cls, values: dict[str, Any], line_number: int) -> "MissionRecord":
        """Build a record from a validated payload."""
        return cls(source_line_number=line_number, **values)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "date": "2041-03-01",
                "mission_id": "M-77",
                "destination": "Mars",
                "status": "Completed",
                "crew_size": "4",
                "duration_days": 1629,
                "success_rate": "98.2",
                "security_code": "XRT-421-ZQP",
                "source_line_number": 1
            }
        }


class RankedMission(BaseModel):
    """A record at its 1-based position in the duration ordering."""

    rank: int = Field(..., ge=1)
    record: MissionRecord

    def as_row(self) -> dict[str, Any]:
        """Flatten into the column order shared by the JSON and CSV reports."""
        return {"rank": self.rank, **self.record.model_dump()}
