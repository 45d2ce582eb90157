"""
Date Rules for Training Records.

Pure helpers shared by the report stages:
    - Parsing of MM/DD/YYYY strings
    - Calendar-month addition (month-end clamping, not 30-day arithmetic)
    - Fiscal-year windows (July 1 of Y-1 through June 30 of Y)
    - Expiration status of a training relative to a reference date

Design Notes:
    - No shared formatter or calendar state
    - Fiscal-year bounds are exclusive on both ends
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from training_reports.domain.entities import ExpirationStatus

DATE_FORMAT = "%m/%d/%Y"

FISCAL_YEAR_START_MONTH = 7
FISCAL_YEAR_END_MONTH = 6
FISCAL_YEAR_END_DAY = 30


class DateParseError(ValueError):
    """Raised when a date string is not a valid MM/DD/YYYY calendar date."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid date {value!r}, expected MM/DD/YYYY")
        self.value = value


def parse_date(value: str) -> date:
    """
    Parse a MM/DD/YYYY string into a date.

    Args:
        value: Date string, e.g. "10/01/2023"

    Returns:
        Parsed calendar date

    Raises:
        DateParseError: If the string is not a real MM/DD/YYYY date
    """
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise DateParseError(value) from e


def add_one_month(value: date) -> date:
    """
    Add one calendar month.

    Keeps the day of month and clamps to the last day of shorter months,
    e.g. 01/31/2024 -> 02/29/2024.
    """
    return value + relativedelta(months=1)


def fiscal_year_window(fiscal_year: int) -> Tuple[date, date]:
    """Start (July 1 of Y-1) and end (June 30 of Y) of fiscal year Y."""
    start = date(fiscal_year - 1, FISCAL_YEAR_START_MONTH, 1)
    end = date(fiscal_year, FISCAL_YEAR_END_MONTH, FISCAL_YEAR_END_DAY)
    return start, end


def is_within_fiscal_year(completed_on: str, fiscal_year: int) -> bool:
    """
    Check whether a completion date falls inside fiscal year Y.

    Both bounds are exclusive: completions dated exactly July 1 of Y-1
    or exactly June 30 of Y are not counted.

    Raises:
        DateParseError: If completed_on cannot be parsed
    """
    completed = parse_date(completed_on)
    start, end = fiscal_year_window(fiscal_year)
    return start < completed < end


def expiration_status(
    expires: Optional[str],
    reference_date: date,
) -> ExpirationStatus:
    """
    Classify a training's expiration date against a reference date.

    Args:
        expires: Expiration date string, or None for trainings that never expire
        reference_date: Date the report is computed for

    Returns:
        EXPIRED if expires < reference,
        EXPIRE_SOON if reference <= expires < reference + 1 month,
        NOT_EXPIRED otherwise (including no expiration date),
        UNKNOWN if the expiration date cannot be parsed
    """
    if expires is None:
        return ExpirationStatus.NOT_EXPIRED

    try:
        expires_on = parse_date(expires)
    except DateParseError:
        return ExpirationStatus.UNKNOWN

    if expires_on < reference_date:
        return ExpirationStatus.EXPIRED
    if expires_on < add_one_month(reference_date):
        return ExpirationStatus.EXPIRE_SOON
    return ExpirationStatus.NOT_EXPIRED
