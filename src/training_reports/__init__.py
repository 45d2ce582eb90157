"""
Training Reports - Batch Reports over Training Completion Records.

Loads people and their completed trainings from a JSON record set and
derives three reports from it:
    - Completion counts per training name
    - People who completed selected trainings within a fiscal year
    - People with trainings that are expired or expire within a month

Architecture:
    - Ports & Adapters (loader, writer, audit logger, metrics)
    - Dependency Injection for testability
    - Report stages as independent, pure read-only queries
    - Configuration-driven parameters via YAML

Main Components:
    - domain: Core entities (Person, Training, ExpirationStatus) and dates
    - reports: Concrete report stages
    - pipeline: Orchestration of load, build and write
    - adapters: Infrastructure implementations (JSON I/O, loggers)
    - config: Configuration models and loaders

Example:
    >>> from training_reports.pipeline import create_pipeline
    >>> from training_reports.config import ReportConfig
    >>> result = create_pipeline(ReportConfig()).run()
    >>> print(f"Loaded {result.people_count} people")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Training Reports.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import training_reports
        >>> training_reports.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("training_reports").setLevel(level)
