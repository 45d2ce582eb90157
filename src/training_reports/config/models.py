"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_validator

from training_reports.domain.dates import DateParseError, parse_date


class InputConfig(BaseModel):
    """Where the training record set is read from."""

    path: str = Field(default="data/trainings.json")


class OutputConfig(BaseModel):
    """Destination file of each report."""

    completion_counts: str = Field(default="output/output1.json")
    fiscal_year_completions: str = Field(default="output/output2.json")
    expiring_trainings: str = Field(default="output/output3.json")


class FiscalYearReportConfig(BaseModel):
    """Configuration for the fiscal-year completions report."""

    trainings: List[str] = Field(
        default_factory=lambda: [
            "Electrical Safety for Labs",
            "X-Ray Safety",
            "Laboratory Safety Training",
        ]
    )
    fiscal_year: int = Field(default=2024, ge=1900, le=9999)


class ExpirationReportConfig(BaseModel):
    """Configuration for the expiring trainings report."""

    reference_date: str = Field(default="10/01/2023")

    @field_validator("reference_date")
    @classmethod
    def check_reference_date(cls, value: str) -> str:
        try:
            parse_date(value)
        except DateParseError as e:
            raise ValueError(str(e)) from e
        return value

    @property
    def reference(self) -> date:
        """Reference date as a calendar value."""
        return parse_date(self.reference_date)


class ReportConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    fiscal_year_report: FiscalYearReportConfig = Field(
        default_factory=FiscalYearReportConfig,
    )
    expiration_report: ExpirationReportConfig = Field(
        default_factory=ExpirationReportConfig,
    )
