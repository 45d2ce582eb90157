"""
Core Domain Entities.

This module defines the fundamental entities of the training records domain.
Dates are kept as the MM/DD/YYYY strings found in the input and are only
converted to calendar values by the report stages that need them.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

# Month and day may be one or two digits, year is four digits.
DATE_PATTERN = r"^\d{1,2}/\d{1,2}/\d{4}$"


class ExpirationStatus(str, Enum):
    """Expiration state of a training relative to a reference date."""

    NOT_EXPIRED = "not expired"
    EXPIRE_SOON = "expire soon"
    EXPIRED = "expired"
    UNKNOWN = "unknown"

    @property
    def is_reportable(self) -> bool:
        """Whether a training in this state belongs in the expiration report."""
        return self in (ExpirationStatus.EXPIRED, ExpirationStatus.EXPIRE_SOON)


class Training(BaseModel):
    """A completed training record."""

    name: str = Field(..., description="Training name")
    timestamp: str = Field(
        ..., pattern=DATE_PATTERN, description="Completion date (MM/DD/YYYY)"
    )
    expires: Optional[str] = Field(
        default=None, pattern=DATE_PATTERN, description="Expiration date (MM/DD/YYYY)"
    )

    model_config = {"frozen": True}

    def label(self, status: ExpirationStatus) -> str:
        """Render the training as it appears in the expiration report."""
        return f"{self.name} ({status.value})"


class Person(BaseModel):
    """A person with their ordered training completions."""

    name: str = Field(..., description="Person name")
    completions: List[Training] = Field(
        default_factory=list, description="Completed trainings in input order"
    )

    model_config = {"frozen": True}

    def completions_named(self, training_name: str) -> List[Training]:
        """All completions of the given training, renewals included."""
        return [c for c in self.completions if c.name == training_name]
