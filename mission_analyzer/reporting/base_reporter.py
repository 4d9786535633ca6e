"""
Base reporter interface.

A reporter turns the ranked missions and run statistics into the payload
written to standard output. Supplementary text for the diagnostic channel
is optional.
"""

from abc import ABC, abstractmethod

from mission_analyzer.core.models import ProcessingStatistics, RankedMission

# Column order shared by the structured reports
REPORT_COLUMNS = (
    "rank",
    "date",
    "mission_id",
    "destination",
    "status",
    "crew_size",
    "duration_days",
    "success_rate",
    "security_code",
    "source_line_number",
)


class BaseReporter(ABC):
    """Abstract base class for all output formats."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    @abstractmethod
    def render(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> str:
        """
        Render the report payload.

        Args:
            missions: Selected missions in rank order
            statistics: Counters of the run

        Returns:
            Text for standard output, ending with a newline
        """
        pass

    def render_diagnostics(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> str:
        """Text for the diagnostic channel; empty when the format has none."""
        return ""

    @property
    @abstractmethod
    def output_mode(self) -> str:
        """Return the output mode identifier."""
        pass
