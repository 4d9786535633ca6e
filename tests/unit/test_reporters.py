"""
Unit tests for the report formats.
"""

import csv
import io
import json

import pytest

from mission_analyzer.core.models import MissionRecord, ProcessingStatistics, RankedMission
from mission_analyzer.core.settings import OutputMode
from mission_analyzer.reporting import (
    REPORT_COLUMNS,
    CsvReporter,
    JsonReporter,
    TextReporter,
    get_reporter,
)


@pytest.fixture
def statistics() -> ProcessingStatistics:
    return ProcessingStatistics(
        total_lines=12,
        skipped_lines=3,
        data_lines=9,
        category_matches=7,
        qualifying_matches=6,
        errors=3,
        valid_count=2,
    )


@pytest.fixture
def missions() -> list[RankedMission]:
    first = MissionRecord(
        date="2045-07-12",
        mission_id="KLM-1234",
        destination="Mars",
        status="Completed",
        crew_size="5",
        duration_days=900,
        success_rate="98.7",
        security_code="STU-901-FGH",
        source_line_number=10,
    )
    second = MissionRecord(
        date="2046-01-02",
        mission_id="Ares, IV",
        destination="MARS",
        status="completed",
        crew_size="3",
        duration_days=387,
        success_rate="91",
        security_code="TRX-842-YHG",
        source_line_number=4,
    )
    return [RankedMission(rank=1, record=first), RankedMission(rank=2, record=second)]


@pytest.mark.unit
class TestTextReporter:
    """Tests for TextReporter"""

    def test_single_result(self, missions, statistics):
        output = TextReporter().render(missions[:1], statistics)
        assert output == "Security Code: STU-901-FGH\nMission Length: 900 days\n"

    def test_multiple_results_show_ranks(self, missions, statistics):
        output = TextReporter().render(missions, statistics)

        assert "--- Rank #1 ---" in output
        assert "--- Rank #2 ---" in output
        assert output.index("STU-901-FGH") < output.index("TRX-842-YHG")

    def test_verbose_prints_every_field(self, missions, statistics):
        output = TextReporter(verbose=True).render(missions[:1], statistics)

        for expected in [
            "Date: 2045-07-12",
            "Mission ID: KLM-1234",
            "Destination: Mars",
            "Status: Completed",
            "Crew Size: 5",
            "Success Rate: 98.7%",
            "Duration: 900 days",
            "Security Code: STU-901-FGH",
            "Found at line: 10",
        ]:
            assert expected in output

    def test_statistics_only_in_verbose_diagnostics(self, missions, statistics):
        assert TextReporter().render_diagnostics(missions, statistics) == ""

        diagnostics = TextReporter(verbose=True).render_diagnostics(missions, statistics)

        assert "=== Processing Statistics ===" in diagnostics
        assert "Total lines processed: 12" in diagnostics
        assert "Data lines: 9" in diagnostics
        assert "Top 2 Missions" in diagnostics

    def test_statistics_not_in_payload(self, missions, statistics):
        output = TextReporter(verbose=True).render(missions, statistics)
        assert "Processing Statistics" not in output


@pytest.mark.unit
class TestJsonReporter:
    """Tests for JsonReporter"""

    def test_document_structure(self, missions, statistics):
        document = json.loads(JsonReporter().render(missions, statistics))

        assert document["statistics"] == {
            "total_lines": 12,
            "data_lines": 9,
            "category_matches": 7,
            "qualifying_matches": 6,
            "valid_count": 2,
            "errors": 3,
        }
        assert len(document["missions"]) == 2

        first = document["missions"][0]
        assert list(first) == list(REPORT_COLUMNS)
        assert first["rank"] == 1
        assert first["security_code"] == "STU-901-FGH"
        assert first["duration_days"] == 900
        assert first["source_line_number"] == 10

    def test_record_values_are_not_rewritten(self, missions, statistics):
        document = json.loads(JsonReporter().render(missions, statistics))
        assert document["missions"][1]["destination"] == "MARS"
        assert document["missions"][1]["status"] == "completed"


@pytest.mark.unit
class TestCsvReporter:
    """Tests for CsvReporter"""

    def test_header_and_rows(self, missions, statistics):
        output = CsvReporter().render(missions, statistics)
        lines = output.splitlines()

        assert lines[0] == ",".join(REPORT_COLUMNS)
        assert lines[1] == "1,2045-07-12,KLM-1234,Mars,Completed,5,900,98.7,STU-901-FGH,10"
        assert len(lines) == 3

    def test_fields_with_commas_are_quoted(self, missions, statistics):
        output = CsvReporter().render(missions, statistics)
        assert '"Ares, IV"' in output

    def test_csv_and_json_carry_the_same_values(self, missions, statistics):
        """Cross-format consistency for every record and column"""
        rows = list(csv.DictReader(io.StringIO(CsvReporter().render(missions, statistics))))
        document = json.loads(JsonReporter().render(missions, statistics))

        assert len(rows) == len(document["missions"])
        for row, item in zip(rows, document["missions"]):
            assert row == {column: str(item[column]) for column in REPORT_COLUMNS}


@pytest.mark.unit
class TestReporterRegistry:
    """Tests for get_reporter"""

    @pytest.mark.parametrize("mode,reporter_class", [
        (OutputMode.DEFAULT, TextReporter),
        ("json", JsonReporter),
        ("csv", CsvReporter),
    ])
    def test_mode_selects_reporter(self, mode, reporter_class):
        reporter = get_reporter(mode, verbose=True)
        assert isinstance(reporter, reporter_class)
        assert reporter.verbose is True
        assert reporter.output_mode == OutputMode(mode).value

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            get_reporter("xml")
