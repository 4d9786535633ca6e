"""
Single-pass mission log analysis.
"""

from .aggregator import MissionAggregator
from .pipeline import AnalysisResult, MissionPipeline, NoValidMissionsError
from .ranking import TopMissionsHeap, rank_missions, select_top

__all__ = [
    "AnalysisResult",
    "MissionAggregator",
    "MissionPipeline",
    "NoValidMissionsError",
    "TopMissionsHeap",
    "rank_missions",
    "select_top",
]
