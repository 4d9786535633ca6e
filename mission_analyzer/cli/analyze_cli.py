"""
Command-line interface for mission log analysis.

Usage:
    mission-analyzer <input_file> [options]
    python -m mission_analyzer <input_file> [options]
"""

import argparse
import os
import sys

import yaml
from pydantic import ValidationError as ConfigValidationError

from mission_analyzer import __version__
from mission_analyzer.batch import MissionPipeline, NoValidMissionsError
from mission_analyzer.core.settings import AnalyzerConfig, OutputMode, load_config
from mission_analyzer.observability.logger import APP_LOGGER, get_logger, setup_logger
from mission_analyzer.reporting import get_reporter

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mission-analyzer",
        description="Find the longest successful missions in a pipe-delimited mission log",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Longest completed Mars mission
  mission-analyzer space_missions.log

  # Top 5 as JSON, with per-line warnings on stderr
  mission-analyzer space_missions.log --top 5 --format json --verbose

  # Completed Moon missions as CSV
  mission-analyzer space_missions.log --destination moon --format csv

  # Settings from a YAML file, overridden on the command line
  mission-analyzer space_missions.log --config analyzer.yaml --top 3
        """
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        help="Mission log file to analyze"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Show processing statistics, warnings and every mission field"
    )
    parser.add_argument(
        "-f", "--format",
        dest="output_mode",
        choices=[mode.value for mode in OutputMode],
        help="Output format (default: default)"
    )
    parser.add_argument(
        "-t", "--top",
        type=int,
        help="Show the top N longest missions (default: 1)"
    )
    parser.add_argument(
        "--destination",
        help="Destination to match, case-insensitive (default: mars)"
    )
    parser.add_argument(
        "--status",
        help="Status to match, case-insensitive (default: completed)"
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML settings file"
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "detailed", "json"],
        help="Diagnostic log format (default: text, or LOG_FORMAT)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def _configure_logging(config: AnalyzerConfig | None, log_format: str | None) -> None:
    # Explicit LOG_LEVEL wins; otherwise per-line warnings only in verbose mode
    level = os.getenv("LOG_LEVEL")
    if not level:
        level = "WARNING" if config is not None and config.verbose else "ERROR"
    setup_logger(APP_LOGGER, level=level, format_type=log_format)


def run(args: argparse.Namespace) -> int:
    """
    Execute the analysis described by parsed arguments.

    Returns:
        Process exit code
    """
    _configure_logging(None, args.log_format)

    try:
        config = load_config(
            args.config,
            destination=args.destination,
            status=args.status,
            output_mode=args.output_mode,
            top=args.top,
            verbose=args.verbose,
        )
    except (ConfigValidationError, ValueError, OSError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_FAILURE

    _configure_logging(config, args.log_format)

    if not args.input_file:
        logger.error("No input file provided.")
        logger.error("Usage: mission-analyzer <input_file> [OPTIONS]")
        logger.error("Try 'mission-analyzer --help' for more information.")
        return EXIT_FAILURE

    pipeline = MissionPipeline(config, retain_limit=config.result_count)

    try:
        result = pipeline.analyze_file(args.input_file)
    except OSError as e:
        logger.error(f"Failed to open file: {e}")
        return EXIT_FAILURE

    try:
        result.require_missions()
    except NoValidMissionsError as e:
        logger.error(
            f"No valid {config.status} {config.destination} missions found: {e.reason}"
        )
        return EXIT_FAILURE

    missions = result.top(config.result_count)
    reporter = get_reporter(config.output_mode, verbose=config.verbose)

    diagnostics = reporter.render_diagnostics(missions, result.statistics)
    if diagnostics:
        sys.stderr.write(diagnostics)
        sys.stderr.flush()

    sys.stdout.write(reporter.render(missions, result.statistics))
    sys.stdout.flush()

    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
