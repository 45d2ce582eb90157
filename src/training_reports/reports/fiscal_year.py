"""
Fiscal-Year Completions Report.

For each configured training, lists the people who completed it within
the configured fiscal year (July 1 of Y-1 through June 30 of Y, both
bounds exclusive).
"""

from __future__ import annotations

import logging
from typing import Dict, List

from training_reports.config.models import FiscalYearReportConfig
from training_reports.domain.dates import DateParseError, is_within_fiscal_year
from training_reports.domain.entities import Person

logger = logging.getLogger(__name__)


class FiscalYearFilter:
    """List people per training completed within a fiscal year."""

    def __init__(self, config: FiscalYearReportConfig) -> None:
        """
        Initialize with configuration.

        Args:
            config: Trainings to report on and the fiscal year
        """
        self.config = config

    @property
    def name(self) -> str:
        """Unique name of this report stage."""
        return "fiscal_year_completions"

    def build(self, people: List[Person]) -> Dict[str, List[str]]:
        """
        Build the fiscal-year completions report.

        Every configured training appears as a key, even when nobody
        completed it in the fiscal year. People are listed once per
        training, in input order.

        Args:
            people: Loaded people

        Returns:
            Training name -> names of people with a completion in the window
        """
        report: Dict[str, List[str]] = {}
        for training_name in self.config.trainings:
            if training_name in report:
                continue
            report[training_name] = [
                person.name
                for person in people
                if self._completed_in_fiscal_year(person, training_name)
            ]
        return report

    def _completed_in_fiscal_year(self, person: Person, training_name: str) -> bool:
        """Check whether any completion of the training falls in the window."""
        for completion in person.completions_named(training_name):
            try:
                if is_within_fiscal_year(completion.timestamp, self.config.fiscal_year):
                    return True
            except DateParseError as e:
                logger.warning(
                    f"Skipping {training_name!r} completion of {person.name!r}: {e}"
                )
        return False
