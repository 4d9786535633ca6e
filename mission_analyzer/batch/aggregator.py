"""
Aggregation of per-line outcomes into statistics and the working set.
"""

from mission_analyzer.batch.ranking import TopMissionsHeap, rank_missions
from mission_analyzer.core.models import MissionRecord, ProcessingStatistics


class MissionAggregator:
    """
    Owns the statistics and the valid records of one pass.

    With retain_limit set, only the best retain_limit records are kept in
    memory; counters are unaffected and the ranked prefix is identical.
    """

    def __init__(self, retain_limit: int | None = None):
        self.statistics = ProcessingStatistics()
        self._records: list[MissionRecord] = []
        self._top: TopMissionsHeap | None = (
            TopMissionsHeap(retain_limit) if retain_limit is not None else None
        )

    def count_line(self) -> None:
        self.statistics.total_lines += 1

    def count_skipped(self) -> None:
        self.statistics.skipped_lines += 1

    def count_data_line(self) -> None:
        self.statistics.data_lines += 1

    def count_category_match(self) -> None:
        self.statistics.category_matches += 1

    def count_qualifying_match(self) -> None:
        self.statistics.qualifying_matches += 1

    def count_error(self) -> None:
        self.statistics.errors += 1

    def add_valid(self, record: MissionRecord) -> None:
        self.statistics.valid_count += 1
        if self._top is not None:
            self._top.push(record)
        else:
            self._records.append(record)

    def ranked(self) -> list[MissionRecord]:
        """Hand the working set over to the ranker."""
        records = self._top.records() if self._top is not None else self._records
        return rank_missions(records)
