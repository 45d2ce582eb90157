"""
Domain Layer - Core Entities and Date Rules.

This package contains the core domain model for Training Reports.
All entities here are pure Python with no infrastructure dependencies
(except Pydantic for validation).

Entities:
    - Training: A single completed training, optionally expiring
    - Person: A named person with an ordered list of completions
    - ExpirationStatus: Tagged status of an expiring training

Value Objects:
    - ReportOutcome: Result of building and writing one report
    - RunResult: Complete result of a report run

Date Rules:
    - parse_date: Strict MM/DD/YYYY parsing
    - add_one_month: Calendar-month addition with month-end clamping
    - fiscal_year_window / is_within_fiscal_year: Fiscal-year membership
    - expiration_status: Single status computation for report 3

Design Principles:
    - Immutable (frozen models)
    - Dates kept as strings until point of use
    - Pure functions, no process-wide state
"""

from training_reports.domain.entities import ExpirationStatus, Person, Training
from training_reports.domain.value_objects import ReportOutcome, RunResult
from training_reports.domain.dates import (
    DATE_FORMAT,
    DateParseError,
    add_one_month,
    expiration_status,
    fiscal_year_window,
    is_within_fiscal_year,
    parse_date,
)

__all__ = [
    "ExpirationStatus",
    "Person",
    "Training",
    "ReportOutcome",
    "RunResult",
    "DATE_FORMAT",
    "DateParseError",
    "add_one_month",
    "expiration_status",
    "fiscal_year_window",
    "is_within_fiscal_year",
    "parse_date",
]
