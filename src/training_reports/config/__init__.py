"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of Training Reports:
    - Pydantic models for type-safe configuration
    - YAML loader with validation and built-in defaults

Configuration Structure:
    - ReportConfig: Root configuration object
    - InputConfig: Location of the training record set
    - OutputConfig: Destination of each report
    - FiscalYearReportConfig: Trainings and fiscal year for report 2
    - ExpirationReportConfig: Reference date for report 3
"""

from training_reports.config.models import (
    ExpirationReportConfig,
    FiscalYearReportConfig,
    InputConfig,
    OutputConfig,
    ReportConfig,
)
from training_reports.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader

__all__ = [
    "ExpirationReportConfig",
    "FiscalYearReportConfig",
    "InputConfig",
    "OutputConfig",
    "ReportConfig",
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
]
