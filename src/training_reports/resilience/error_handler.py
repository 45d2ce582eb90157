"""
Error Handler - Failure Isolation for Report Runs.

Provides:
    - The exception hierarchy of the package
    - Per-item error boundaries, so one failing report write does not
      prevent the others

Design Notes:
    - Configuration and load failures are fatal and propagate
    - Write failures are isolated per report
    - No retries
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TrainingReportsError(Exception):
    """Base class for errors raised by Training Reports."""

    def __init__(
        self, message: str, path: Optional[Union[str, Path]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None


class ConfigError(TrainingReportsError):
    """Raised when the configuration file cannot be read or is invalid."""
    pass


class ParseError(TrainingReportsError):
    """Raised when the training record set cannot be loaded."""
    pass


class ReportWriteError(TrainingReportsError):
    """Raised when a report cannot be written to its destination."""
    pass


@dataclass
class IsolatedRun(Generic[T]):
    """Results of items processed behind separate error boundaries."""
    successful: List[T] = field(default_factory=list)
    failed: List[Tuple[Any, Exception]] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """Check if any item failed."""
        return len(self.failed) > 0


class ErrorHandler:
    """
    Runs independent units of work behind separate error boundaries.

    Only the configured exception types are isolated; anything else
    propagates to the caller.
    """

    def __init__(self, isolated_exceptions: tuple = (ReportWriteError,)) -> None:
        """
        Initialize error handler.

        Args:
            isolated_exceptions: Exception types recorded as item failures
        """
        self.isolated_exceptions = isolated_exceptions

    def run_isolated(
        self,
        items: List[Any],
        processor: Callable[[Any], T],
        operation_name: str = "batch operation",
    ) -> IsolatedRun[T]:
        """
        Process every item, recording isolated failures instead of raising.

        Args:
            items: Items to process, in order
            processor: Function to process each item
            operation_name: Name for logging

        Returns:
            IsolatedRun with successful results and failed items
        """
        result: IsolatedRun[T] = IsolatedRun()

        for item in items:
            try:
                result.successful.append(processor(item))
            except self.isolated_exceptions as e:
                result.failed.append((item, e))
                logger.warning(f"{operation_name} failed for {item}: {e}")

        if result.has_failures:
            logger.warning(
                f"{operation_name}: {len(result.failed)} of {len(items)} failed"
            )

        return result
