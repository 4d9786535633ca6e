"""
Ranking of valid missions by duration.

Order: duration_days descending; equal durations keep the order in which
records were read (ascending source line number).
"""

import heapq
import itertools
from typing import Iterable

from mission_analyzer.core.models import MissionRecord, RankedMission


def _rank_key(record: MissionRecord) -> tuple[int, int]:
    return (-record.duration_days, record.source_line_number)


def rank_missions(records: Iterable[MissionRecord]) -> list[MissionRecord]:
    """Return the records in rank order."""
    return sorted(records, key=_rank_key)


def select_top(ranked: list[MissionRecord], count: int) -> list[RankedMission]:
    """
    Take the first count records of a ranked list and number them from 1.

    A count larger than the list returns the whole list.
    """
    return [
        RankedMission(rank=idx, record=record)
        for idx, record in enumerate(ranked[:count], start=1)
    ]


class TopMissionsHeap:
    """
    Bounded min-heap retaining only the best `limit` records seen so far.

    The heap root is the weakest retained record: the shortest duration,
    and among equal durations the one read last. A new record replaces the
    root only if it ranks strictly higher, which keeps earlier lines ahead
    on ties.
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._heap: list[tuple[int, int, int, MissionRecord]] = []
        # Breaks ties between records that share a line number
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, record: MissionRecord) -> None:
        item = (record.duration_days, -record.source_line_number, next(self._counter), record)
        if len(self._heap) < self.limit:
            heapq.heappush(self._heap, item)
        elif item[:2] > self._heap[0][:2]:
            heapq.heapreplace(self._heap, item)

    def records(self) -> list[MissionRecord]:
        """Retained records in insertion order, ready for rank_missions."""
        return sorted((item[3] for item in self._heap), key=lambda r: r.source_line_number)
