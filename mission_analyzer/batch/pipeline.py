"""
Mission log analysis pipeline.

Coordinates the single pass: read → skip → parse → classify → validate → aggregate,
then ranks the valid records once the input is exhausted.
"""

import logging
from pathlib import Path
from typing import IO, Any, Iterable

from pydantic import BaseModel

from mission_analyzer.batch.aggregator import MissionAggregator
from mission_analyzer.batch.ranking import select_top
from mission_analyzer.batch.readers import LineParser, MalformedLineError, MissionLogReader
from mission_analyzer.core.models import (
    LogEntry,
    MissionRecord,
    ProcessingStatistics,
    RankedMission,
    RawLine,
)
from mission_analyzer.core.rules import RuleEngine, default_mission_rules
from mission_analyzer.core.settings import AnalyzerConfig
from mission_analyzer.observability.logger import get_logger, log_operation

logger = get_logger(__name__)


class NoValidMissionsError(Exception):
    """Raised when a completed pass produced no valid qualifying record."""

    def __init__(self, statistics: ProcessingStatistics):
        self.statistics = statistics
        self.reason = statistics.failure_reason() or "no valid missions found"
        super().__init__(self.reason)


class AnalysisResult(BaseModel):
    """
    Outcome of one pass.

    Attributes:
        statistics: Counters accumulated during the pass
        missions: Valid records in rank order
    """

    statistics: ProcessingStatistics
    missions: list[MissionRecord]

    def require_missions(self) -> None:
        """
        Raises:
            NoValidMissionsError: If the pass found no valid record
        """
        if self.statistics.valid_count == 0:
            raise NoValidMissionsError(self.statistics)

    def top(self, count: int | None = None) -> list[RankedMission]:
        """
        Select the records to report.

        Args:
            count: Requested number of results; None or 0 means 1

        Returns:
            At most count ranked records
        """
        return select_top(self.missions, count or 1)


class MissionPipeline:
    """
    Orchestrates the analysis of one mission log.

    Flow per line:
    1. Count the line; undecodable lines are counted as errors; skip blank,
       comment and metadata lines
    2. Split into fields (malformed lines are counted as errors)
    3. Match destination, then destination and status, case-insensitively
    4. Run the rule engine on qualifying entries
    5. Store valid records in the aggregator
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        rules: list[dict[str, Any]] | None = None,
        retain_limit: int | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Run configuration (defaults apply if None)
            rules: Validation rules for qualifying entries (default mission rules if None)
            retain_limit: Keep only this many best records in memory
        """
        self.config = config or AnalyzerConfig()
        self.parser = LineParser(self.config.skip_prefixes)
        self.reader = MissionLogReader()
        self.rule_engine = RuleEngine(rules if rules is not None else default_mission_rules())
        self.retain_limit = retain_limit

        self._destination = self.config.destination.casefold()
        self._status = self.config.status.casefold()

        logger.debug(f"Loaded validation rules: {self.rule_engine.get_rule_summary()}")

    def analyze_file(self, file_path: str | Path) -> AnalysisResult:
        """
        Analyze a log file.

        Raises:
            OSError: If the file cannot be read
        """
        with log_operation(
            "Analyzing mission log",
            logger=logger,
            failure_level=logging.DEBUG,
            source=str(file_path),
        ):
            return self.run(self.reader.read(file_path))

    def analyze_stream(self, stream: IO[str] | Iterable[str]) -> AnalysisResult:
        """Analyze an open text stream or an iterable of lines."""
        return self.run(self.reader.read_stream(stream))

    def run(self, lines: Iterable[RawLine]) -> AnalysisResult:
        """
        Process every line once and rank the valid records.

        Args:
            lines: Numbered input lines

        Returns:
            AnalysisResult with statistics and ranked missions
        """
        aggregator = MissionAggregator(self.retain_limit)

        for line in lines:
            self._process_line(line, aggregator)

        statistics = aggregator.statistics
        logger.info(
            f"Processed {statistics.total_lines} lines: {statistics.valid_count} valid, "
            f"{statistics.errors} errors"
        )

        return AnalysisResult(statistics=statistics, missions=aggregator.ranked())

    def _process_line(self, line: RawLine, aggregator: MissionAggregator) -> None:
        aggregator.count_line()

        if line.decode_error is not None:
            logger.warning(f"Line {line.line_number} could not be decoded ({line.decode_error}); line skipped")
            aggregator.count_data_line()
            aggregator.count_error()
            return

        if self.parser.is_skippable(line.text):
            aggregator.count_skipped()
            return

        aggregator.count_data_line()

        try:
            entry = self.parser.parse(line)
        except MalformedLineError as e:
            logger.warning(f"{e}; line skipped")
            aggregator.count_error()
            return

        if entry.destination.casefold() != self._destination:
            return
        aggregator.count_category_match()

        if entry.status.casefold() != self._status:
            return
        aggregator.count_qualifying_match()

        record = self._validate(entry)
        if record is None:
            aggregator.count_error()
            return

        aggregator.add_valid(record)

    def _validate(self, entry: LogEntry) -> MissionRecord | None:
        result = self.rule_engine.validate_entry(entry)

        if not result.passed:
            for rule_name, message in zip(result.failed_rules, result.error_messages):
                logger.warning(f"Line {entry.line_number} rejected by {rule_name}: {message}")
            return None

        return MissionRecord.from_values(result.values, entry.line_number)
