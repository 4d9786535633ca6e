"""
CsvReporter - one header row followed by one row per mission.
"""

import csv
import io

from mission_analyzer.core.models import ProcessingStatistics, RankedMission

from .base_reporter import REPORT_COLUMNS, BaseReporter


class CsvReporter(BaseReporter):
    """Renders the selected missions as CSV; statistics are not part of the payload."""

    def render(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> str:
        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=list(REPORT_COLUMNS),
            lineterminator="\n",
            extrasaction="ignore",
        )
        writer.writeheader()
        for mission in missions:
            writer.writerow(mission.as_row())
        return buffer.getvalue()

    @property
    def output_mode(self) -> str:
        return "csv"
