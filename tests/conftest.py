"""
Pytest configuration and fixtures for mission-analyzer tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import logging
from pathlib import Path

import pytest

from mission_analyzer.core.settings import AnalyzerConfig
from mission_analyzer.observability.logger import APP_LOGGER

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full pipeline over in-memory input"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command-line interface"
    )


# =======================
# LOGGING
# =======================

@pytest.fixture(autouse=True)
def reset_app_logger():
    """
    Drop handlers bound to streams captured by a previous test.

    The CLI rebinds the package logger to the current sys.stderr on every run.
    """
    yield
    logging.getLogger(APP_LOGGER).handlers.clear()


# =======================
# SAMPLE DATA
# =======================

def make_line(
    date="2045-07-12",
    mission_id="KLM-1234",
    destination="Mars",
    status="Completed",
    crew_size="5",
    duration="387",
    success_rate="98.7",
    security_code="TRX-842-YHG",
) -> str:
    """Build one pipe-delimited mission log line."""
    return " | ".join([
        date, mission_id, destination, status, crew_size, duration, success_rate, security_code
    ])


@pytest.fixture
def default_config() -> AnalyzerConfig:
    """Configuration with all defaults (Mars / Completed, text output, top 1)"""
    return AnalyzerConfig()


@pytest.fixture
def sample_lines() -> list[str]:
    """
    A small log covering every outcome.

    Line numbers: 1-3 skipped, 4 valid (387), 5 wrong destination,
    6 wrong status, 7 malformed, 8 invalid duration, 9 invalid code,
    10 valid (900), 11 valid (120), 12 valid tie (900).
    """
    return [
        "SYSTEM: mission control export",
        "# date | mission | destination | status | crew | duration | success | code",
        "",
        make_line(mission_id="M-001", duration="387", security_code="TRX-842-YHG"),
        make_line(mission_id="M-002", destination="Jupiter", duration="2000"),
        make_line(mission_id="M-003", status="Failed", duration="1500"),
        "2045-07-12 | M-004 | Mars",
        make_line(mission_id="M-005", duration="-5"),
        make_line(mission_id="M-006", duration="1000", security_code="xrt-421-zqp"),
        make_line(mission_id="M-007", duration="900", security_code="STU-901-FGH"),
        make_line(mission_id="M-008", destination="MARS", status="completed", duration="120",
                  security_code="ABC-123-XYZ"),
        make_line(mission_id="M-009", duration="900", security_code="DEF-456-GHI"),
    ]


@pytest.fixture
def sample_log_file(tmp_path, sample_lines) -> Path:
    """Write sample_lines to a log file"""
    log_file = tmp_path / "missions.log"
    log_file.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return log_file


@pytest.fixture
def fixture_log_file() -> Path:
    """Larger fixture log shipped with the tests"""
    return FIXTURES_DIR / "space_missions.log"


@pytest.fixture
def line_factory():
    """Factory for mission log lines with overridable fields"""
    return make_line
