"""
Command-line entry point.

Runs all reports with config/default.yaml when present, otherwise with
the built-in defaults. Takes no arguments.

Exit codes:
    0: all reports written
    1: at least one report could not be written
    2: the configuration or the record set could not be loaded
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from training_reports import configure_logging
from training_reports.config.loader import ConfigLoader
from training_reports.pipeline.report_pipeline import create_pipeline
from training_reports.resilience.error_handler import ConfigError, ParseError

logger = logging.getLogger("training_reports")


def main(base_path: Optional[Path] = None) -> int:
    """Run the report pipeline and return a process exit code."""
    configure_logging()
    base = base_path or Path(".")

    try:
        config = ConfigLoader(base_path=base).load_or_default()
        result = create_pipeline(config, base_path=base).run()
    except (ConfigError, ParseError) as e:
        logger.error(f"Aborting: {e.message}")
        return 2

    if result.has_failures:
        logger.error(f"Reports not written: {', '.join(result.failed_reports)}")
        return 1

    logger.info(
        f"Wrote {len(result.outcomes)} reports for {result.people_count} people"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
