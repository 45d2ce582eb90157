"""
JSON Report Writer.

Writes each report as a pretty-printed JSON document.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from training_reports.resilience.error_handler import ReportWriteError

logger = logging.getLogger(__name__)


class JsonReportWriter:
    """Serializes report payloads to indented JSON files."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def write(self, path: Union[str, Path], payload: Any) -> Path:
        """
        Write a payload to path, creating parent directories.

        Returns:
            The path written

        Raises:
            ReportWriteError: If the payload cannot be serialized or written
        """
        target = Path(path)
        try:
            text = json.dumps(payload, indent=self.indent, ensure_ascii=False)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise ReportWriteError(f"Cannot write {target}: {e}", target) from e

        logger.debug(f"Wrote {target}")
        return target
