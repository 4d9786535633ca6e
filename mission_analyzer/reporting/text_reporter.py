"""
TextReporter - human readable output.
"""

from mission_analyzer.core.models import ProcessingStatistics, RankedMission

from .base_reporter import BaseReporter


class TextReporter(BaseReporter):
    """
    Prints the security code and mission length of each selected mission.

    In verbose mode every field is printed, and a statistics block plus a
    results heading are produced for the diagnostic channel.
    """

    def render(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> str:
        lines: list[str] = []
        show_rank = len(missions) > 1

        for mission in missions:
            record = mission.record
            if show_rank:
                lines.append("")
                lines.append(f"--- Rank #{mission.rank} ---")

            if self.verbose:
                lines.extend([
                    f"Date: {record.date}",
                    f"Mission ID: {record.mission_id}",
                    f"Destination: {record.destination}",
                    f"Status: {record.status}",
                    f"Crew Size: {record.crew_size}",
                    f"Success Rate: {record.success_rate}%",
                    f"Duration: {record.duration_days} days",
                    f"Security Code: {record.security_code}",
                    f"Found at line: {record.source_line_number}",
                ])
            else:
                lines.append(f"Security Code: {record.security_code}")
                lines.append(f"Mission Length: {record.duration_days} days")

        return "\n".join(lines) + "\n"

    def render_diagnostics(self, missions: list[RankedMission], statistics: ProcessingStatistics) -> str:
        if not self.verbose:
            return ""

        count = len(missions)
        return "\n".join([
            "",
            "=== Processing Statistics ===",
            f"Total lines processed: {statistics.total_lines}",
            f"Skipped lines: {statistics.skipped_lines}",
            f"Data lines: {statistics.data_lines}",
            f"Category matches: {statistics.category_matches}",
            f"Qualifying matches: {statistics.qualifying_matches}",
            f"Valid missions stored: {statistics.valid_count}",
            f"Errors/warnings: {statistics.errors}",
            "============================",
            "",
            f"=== Results (Top {count} Mission{'s' if count > 1 else ''}) ===",
        ]) + "\n"

    @property
    def output_mode(self) -> str:
        return "default"
