"""
JsonReporter - structured document with statistics and missions.
"""

import json

from mission_analyzer.core.models import ProcessingStatistics, RankedMission

from .base_reporter import REPORT_COLUMNS, BaseReporter


class JsonReporter(BaseReporter):
    """
    Renders a pretty-printed JSON document:

        {
          "statistics": {"total_lines": ..., ...},
          "missions": [{"rank": 1, "date": ..., ...}]
        }
    """

    def __init__(self, verbose: bool = False, indent: int = 2):
        super().__init__(verbose)
        self.indent = indent

    def build_document(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> dict:
        rows = [mission.as_row() for mission in missions]
        return {
            "statistics": statistics.reported(),
            "missions": [{column: row[column] for column in REPORT_COLUMNS} for row in rows],
        }

    def render(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> str:
        document = self.build_document(missions, statistics)
        return json.dumps(document, indent=self.indent, ensure_ascii=False) + "\n"

    @property
    def output_mode(self) -> str:
        return "json"
