"""
Resilience Package - Error Types and Failure Isolation.

This package provides:
    - TrainingReportsError and its subclasses (ConfigError, ParseError,
      ReportWriteError)
    - ErrorHandler: Separate error boundaries for report writes

Design Principles:
    - Fail fast when the configuration or the input cannot be loaded
    - Isolate each report write
"""

from training_reports.resilience.error_handler import (
    ConfigError,
    ErrorHandler,
    IsolatedRun,
    ParseError,
    ReportWriteError,
    TrainingReportsError,
)

__all__ = [
    "ConfigError",
    "ErrorHandler",
    "IsolatedRun",
    "ParseError",
    "ReportWriteError",
    "TrainingReportsError",
]
