"""
Expiring Trainings Report.

Finds people with trainings that are expired, or expire within one
calendar month of a reference date, and labels each such training
with its status.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from training_reports.config.models import ExpirationReportConfig
from training_reports.domain.dates import expiration_status
from training_reports.domain.entities import ExpirationStatus, Person

logger = logging.getLogger(__name__)


class ExpirationScanner:
    """Label expired and soon-to-expire trainings per person."""

    def __init__(
        self,
        config: ExpirationReportConfig,
        reference_date: Optional[date] = None,
    ) -> None:
        """
        Initialize with configuration.

        Args:
            config: Expiration report configuration
            reference_date: Overrides config.reference_date when given
        """
        self.config = config
        self.reference_date = reference_date or config.reference

    @property
    def name(self) -> str:
        """Unique name of this report stage."""
        return "expiring_trainings"

    def build(self, people: List[Person]) -> Dict[str, List[str]]:
        """
        Build the expiring trainings report.

        Trainings without an expiration date never qualify. Only people
        with at least one qualifying training are listed.

        Args:
            people: Loaded people

        Returns:
            Person name -> ["<training> (<status>)", ...] in completion order
        """
        report: Dict[str, List[str]] = {}
        for person in people:
            labels = self._labels_for(person)
            if labels:
                report.setdefault(person.name, []).extend(labels)
        return report

    def _labels_for(self, person: Person) -> List[str]:
        labels: List[str] = []
        for training in person.completions:
            if training.expires is None:
                continue
            status = expiration_status(training.expires, self.reference_date)
            if status is ExpirationStatus.UNKNOWN:
                logger.warning(
                    f"Skipping {training.name!r} of {person.name!r}: "
                    f"unparseable expiration date {training.expires!r}"
                )
                continue
            if status.is_reportable:
                labels.append(training.label(status))
        return labels
