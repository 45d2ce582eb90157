"""
Value Objects for Domain Layer.

Immutable records describing the outcome of a report run.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Report payloads indexed by report name
ReportPayloads = Dict[str, Dict[str, Any]]


class ReportOutcome(BaseModel):
    """Outcome of building and writing a single report."""

    report_name: str
    entry_count: int = Field(ge=0)
    path: str
    duration_seconds: float = Field(ge=0)
    written: bool = True
    error: Optional[str] = None

    model_config = {"frozen": True}


class RunResult(BaseModel):
    """Complete result of a report run."""

    people_count: int = Field(ge=0)
    reports: ReportPayloads = Field(default_factory=dict)
    outcomes: List[ReportOutcome] = Field(default_factory=list)
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def has_failures(self) -> bool:
        """Whether any report failed to be written."""
        return any(not outcome.written for outcome in self.outcomes)

    @property
    def failed_reports(self) -> List[str]:
        """Names of reports that failed to be written."""
        return [o.report_name for o in self.outcomes if not o.written]
