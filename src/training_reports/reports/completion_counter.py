"""
Completion Counter Report.

Counts completion records per training name across all people.
Renewals are counted individually.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List

from training_reports.domain.entities import Person


class CompletionCounter:
    """Tally completions per training name."""

    @property
    def name(self) -> str:
        """Unique name of this report stage."""
        return "completion_counts"

    def build(self, people: List[Person]) -> Dict[str, int]:
        """
        Count completions per training name.

        Args:
            people: Loaded people

        Returns:
            Training name -> number of completion records, in first-seen order
        """
        counts: Counter = Counter(
            completion.name
            for person in people
            for completion in person.completions
        )
        return dict(counts)
