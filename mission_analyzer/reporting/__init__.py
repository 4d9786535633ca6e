"""
Report formats for analysis results.
"""

from mission_analyzer.core.settings import OutputMode

from .base_reporter import REPORT_COLUMNS, BaseReporter
from .csv_reporter import CsvReporter
from .json_reporter import JsonReporter
from .text_reporter import TextReporter

REPORTER_REGISTRY: dict[OutputMode, type[BaseReporter]] = {
    OutputMode.DEFAULT: TextReporter,
    OutputMode.JSON: JsonReporter,
    OutputMode.CSV: CsvReporter,
}


def get_reporter(output_mode: OutputMode | str, verbose: bool = False) -> BaseReporter:
    """
    Create the reporter for an output mode.

    Raises:
        ValueError: If the output mode is unknown
    """
    reporter_class = REPORTER_REGISTRY.get(OutputMode(output_mode))
    if not reporter_class:
        raise ValueError(f"Unsupported output mode: {output_mode}")
    return reporter_class(verbose=verbose)


__all__ = [
    "REPORT_COLUMNS",
    "REPORTER_REGISTRY",
    "BaseReporter",
    "CsvReporter",
    "JsonReporter",
    "TextReporter",
    "get_reporter",
]
