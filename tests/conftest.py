"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from training_reports.domain.entities import Person
from training_reports.config.models import (
    ExpirationReportConfig,
    FiscalYearReportConfig,
    ReportConfig,
)
from training_reports.adapters.console_logger import ConsoleAuditLogger
from training_reports.adapters.metrics_collector import InMemoryMetricsCollector
from tests.fixtures import make_person


@pytest.fixture
def alice() -> Person:
    """One person with a non-expiring and an expiring training."""
    return make_person(
        "Alice",
        ("Electrical Safety for Labs", "08/15/2023"),
        ("X-Ray Safety", "07/01/2023", "10/15/2023"),
    )


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Raw record set as it appears in the input file."""
    return [
        {
            "name": "Alice",
            "completions": [
                {"name": "Electrical Safety for Labs", "timestamp": "08/15/2023"},
                {
                    "name": "X-Ray Safety",
                    "timestamp": "07/01/2023",
                    "expires": "10/15/2023",
                },
            ],
        },
        {
            "name": "Bob",
            "completions": [
                {
                    "name": "Laboratory Safety Training",
                    "timestamp": "03/03/2024",
                    "expires": "09/01/2023",
                },
                {
                    "name": "X-Ray Safety",
                    "timestamp": "12/12/2023",
                    "expires": "12/12/2024",
                },
            ],
        },
        {"name": "Carol", "completions": []},
    ]


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a record set to a JSON file under tmp_path."""

    def _write(records: Any, name: str = "trainings.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> ReportConfig:
    """Create default report configuration."""
    return ReportConfig()


@pytest.fixture
def fiscal_year_config() -> FiscalYearReportConfig:
    """Fiscal year 2024 over the three standard trainings."""
    return FiscalYearReportConfig(
        trainings=[
            "Electrical Safety for Labs",
            "X-Ray Safety",
            "Laboratory Safety Training",
        ],
        fiscal_year=2024,
    )


@pytest.fixture
def expiration_config() -> ExpirationReportConfig:
    """Expiration report as of 10/01/2023."""
    return ExpirationReportConfig(reference_date="10/01/2023")
