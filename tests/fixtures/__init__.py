"""
Test Fixtures - Shared Test Data Builders.

Usage:
    from tests.fixtures import make_person
"""

from __future__ import annotations

from training_reports.domain.entities import Person, Training


def make_person(name: str, *completions: tuple) -> Person:
    """Build a Person from (training, timestamp[, expires]) tuples."""
    return Person(
        name=name,
        completions=[
            Training(
                name=c[0],
                timestamp=c[1],
                expires=c[2] if len(c) > 2 else None,
            )
            for c in completions
        ],
    )
