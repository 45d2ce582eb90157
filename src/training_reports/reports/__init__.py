"""
Reports Package - Concrete Report Stages.

Each report stage is a pure, read-only query over the loaded people
and exposes the same shape: a `name` and a `build(people)` method.

Reports:
    - CompletionCounter: Completions per training name
    - FiscalYearFilter: People per training completed within a fiscal year
    - ExpirationScanner: Expired and soon-to-expire trainings per person

Design Principles:
    - Each report is independently testable
    - Configuration injected via constructor
    - No shared mutable state between reports
"""

from training_reports.reports.completion_counter import CompletionCounter
from training_reports.reports.fiscal_year import FiscalYearFilter
from training_reports.reports.expiration import ExpirationScanner

__all__ = [
    "CompletionCounter",
    "FiscalYearFilter",
    "ExpirationScanner",
]
