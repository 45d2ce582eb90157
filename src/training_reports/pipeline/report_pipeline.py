"""
Report Pipeline - Main Orchestrator.

The ReportPipeline loads the training record set once, builds every
report stage over it and writes each report to its own destination.
A failed write is isolated to its report.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from training_reports import __version__
from training_reports.adapters.console_logger import ConsoleAuditLogger
from training_reports.adapters.json_writer import JsonReportWriter
from training_reports.adapters.metrics_collector import InMemoryMetricsCollector
from training_reports.adapters.record_loader import JsonRecordLoader
from training_reports.config.models import ReportConfig
from training_reports.domain.entities import Person
from training_reports.domain.value_objects import ReportOutcome, RunResult
from training_reports.reports.completion_counter import CompletionCounter
from training_reports.reports.expiration import ExpirationScanner
from training_reports.reports.fiscal_year import FiscalYearFilter
from training_reports.resilience.error_handler import ErrorHandler, ParseError

logger = logging.getLogger(__name__)


class RecordLoaderProtocol(Protocol):
    """Protocol for record loaders."""

    def load(self) -> List[Person]:
        ...


class ReportStageProtocol(Protocol):
    """Protocol for report stages."""

    @property
    def name(self) -> str:
        ...

    def build(self, people: List[Person]) -> Dict[str, Any]:
        ...


class ReportWriterProtocol(Protocol):
    """Protocol for report writers."""

    def write(self, path: Union[str, Path], payload: Any) -> Path:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class ReportPipeline:
    """Main orchestrator for a report run."""

    def __init__(
        self,
        loader: RecordLoaderProtocol,
        reports: List[ReportStageProtocol],
        writer: ReportWriterProtocol,
        destinations: Dict[str, Union[str, Path]],
        audit_logger: AuditLoggerProtocol,
        metrics_collector: MetricsCollectorProtocol,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            loader: Source of the training record set
            reports: Ordered list of report stages
            writer: Sink for report payloads
            destinations: Report name -> output path
            audit_logger: For audit trail
            metrics_collector: For performance metrics
            error_handler: Isolates report writes (default: ErrorHandler())
        """
        missing = [r.name for r in reports if r.name not in destinations]
        if missing:
            raise ValueError(f"No destination configured for: {', '.join(missing)}")

        self.loader = loader
        self.reports = reports
        self.writer = writer
        self.destinations = destinations
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.error_handler = error_handler or ErrorHandler()

    def run(self) -> RunResult:
        """
        Execute the report run.

        Returns:
            RunResult with every report payload and per-report outcome

        Raises:
            ParseError: If the record set cannot be loaded; nothing is written
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)

        # 1. Load people
        people = self._load()

        # 2. Build and write each report behind its own error boundary
        payloads: Dict[str, Dict[str, Any]] = {}
        outcomes: Dict[str, ReportOutcome] = {}

        def run_stage(stage: ReportStageProtocol) -> ReportOutcome:
            outcome = self._execute_stage(stage, people, payloads)
            outcomes[stage.name] = outcome
            return outcome

        writes = self.error_handler.run_isolated(
            self.reports, run_stage, operation_name="report write"
        )
        for stage, error in writes.failed:
            outcomes[stage.name] = ReportOutcome(
                report_name=stage.name,
                entry_count=len(payloads.get(stage.name, {})),
                path=str(self.destinations[stage.name]),
                duration_seconds=0.0,
                written=False,
                error=str(error),
            )
            self.audit_logger.log_anomaly(
                f"{stage.name} was not written: {error}", severity="ERROR"
            )
        self.metrics_collector.record_count(
            "report_write_failures_total", len(writes.failed)
        )

        # 3. Record total time
        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("run_total_seconds", total_duration)

        return RunResult(
            people_count=len(people),
            reports=payloads,
            outcomes=[outcomes[stage.name] for stage in self.reports],
            metrics=self.metrics_collector.get_metrics(),
            metadata=self._build_metadata(correlation_id, total_duration),
        )

    def _load(self) -> List[Person]:
        """Load the record set, timing the load."""
        load_start = time.perf_counter()
        try:
            people = self.loader.load()
        except ParseError as e:
            logger.error(f"Loading training records failed: {e.message}")
            self.audit_logger.log_anomaly(
                f"load failed: {e.message}", severity="ERROR", context={"path": e.path}
            )
            raise

        self.metrics_collector.record_timing(
            "load_seconds", time.perf_counter() - load_start
        )
        self.metrics_collector.record_count("people_loaded_total", len(people))
        return people

    def _execute_stage(
        self,
        stage: ReportStageProtocol,
        people: List[Person],
        payloads: Dict[str, Dict[str, Any]],
    ) -> ReportOutcome:
        """Build a single report and write it to its destination."""
        stage_start = time.perf_counter()
        destination = self.destinations[stage.name]

        self.audit_logger.log_stage_start(stage.name, len(people))

        payload = stage.build(people)
        payloads[stage.name] = payload

        build_duration = time.perf_counter() - stage_start
        self.metrics_collector.record_timing(
            "report_build_seconds", build_duration, {"report": stage.name}
        )
        self.metrics_collector.record_count(
            "report_entries_total", len(payload), {"report": stage.name}
        )

        written = self.writer.write(destination, payload)

        stage_duration = time.perf_counter() - stage_start
        self.audit_logger.log_stage_end(
            stage.name, len(payload), stage_duration, {"path": str(written)}
        )

        return ReportOutcome(
            report_name=stage.name,
            entry_count=len(payload),
            path=str(written),
            duration_seconds=stage_duration,
        )

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        """Build result metadata."""
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }


def create_pipeline(
    config: ReportConfig,
    base_path: Optional[Path] = None,
    verbose: bool = True,
) -> ReportPipeline:
    """
    Build the default pipeline from configuration.

    Args:
        config: Validated report configuration
        base_path: Base path for relative input/output paths
        verbose: Passed to the console audit logger

    Returns:
        ReportPipeline wired with JSON I/O and the three report stages
    """
    base = base_path or Path(".")

    def resolve(path: str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else base / p

    reports: List[ReportStageProtocol] = [
        CompletionCounter(),
        FiscalYearFilter(config.fiscal_year_report),
        ExpirationScanner(config.expiration_report),
    ]
    destinations: Dict[str, Union[str, Path]] = {
        "completion_counts": resolve(config.output.completion_counts),
        "fiscal_year_completions": resolve(config.output.fiscal_year_completions),
        "expiring_trainings": resolve(config.output.expiring_trainings),
    }

    return ReportPipeline(
        loader=JsonRecordLoader(resolve(config.input.path)),
        reports=reports,
        writer=JsonReportWriter(),
        destinations=destinations,
        audit_logger=ConsoleAuditLogger(verbose=verbose),
        metrics_collector=InMemoryMetricsCollector(),
    )
