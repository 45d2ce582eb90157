"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the ports used by the report pipeline,
following the Ports & Adapters pattern.

I/O:
    - JsonRecordLoader: Reads the training record set
    - JsonReportWriter: Writes pretty-printed JSON reports

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from training_reports.adapters.record_loader import JsonRecordLoader
from training_reports.adapters.json_writer import JsonReportWriter
from training_reports.adapters.console_logger import ConsoleAuditLogger
from training_reports.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "JsonRecordLoader",
    "JsonReportWriter",
    "ConsoleAuditLogger",
    "InMemoryMetricsCollector",
]
