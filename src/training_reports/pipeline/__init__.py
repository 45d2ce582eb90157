"""
Pipeline Package - Orchestration.

Components:
    - ReportPipeline: Loads records, builds and writes every report
    - create_pipeline: Default wiring from a ReportConfig

The pipeline is responsible for:
    - Loading the record set once (fatal on failure)
    - Building each report stage over the same people
    - Writing each report behind its own error boundary
    - Collecting metrics and audit trail
"""

from training_reports.pipeline.report_pipeline import ReportPipeline, create_pipeline

__all__ = ["ReportPipeline", "create_pipeline"]
