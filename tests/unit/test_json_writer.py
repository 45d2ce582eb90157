"""
Unit Tests for JsonReportWriter.

Test Aspects Covered:
    ✅ Business Logic: Pretty-printed JSON, key order preserved
    ✅ Error Handling: Unwritable destination, unserializable payload
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from training_reports.adapters.json_writer import JsonReportWriter
from training_reports.resilience.error_handler import ReportWriteError


class TestJsonReportWriter:
    """Test cases for JsonReportWriter."""

    def test_writes_indented_json(self, tmp_path: Path) -> None:
        """
        SCENARIO: Write a report payload
        EXPECTED: Indented JSON with the same content and key order
        """
        # Arrange
        payload = {"X-Ray Safety": 2, "Chemical Hygiene": 1}
        path = tmp_path / "output1.json"

        # Act
        written = JsonReportWriter().write(path, payload)

        # Assert
        text = written.read_text(encoding="utf-8")
        assert json.loads(text) == payload
        assert list(json.loads(text)) == ["X-Ray Safety", "Chemical Hygiene"]
        assert '\n  "X-Ray Safety": 2' in text

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Missing output directories are created."""
        path = tmp_path / "nested" / "output" / "report.json"

        JsonReportWriter().write(path, {})

        assert path.exists()

    def test_keeps_non_ascii(self, tmp_path: Path) -> None:
        """Names are written as-is, not escaped."""
        path = tmp_path / "report.json"

        JsonReportWriter().write(path, {"José": ["Laser Safety (expired)"]})

        assert "José" in path.read_text(encoding="utf-8")

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        """
        SCENARIO: Destination is an existing directory
        EXPECTED: ReportWriteError naming the destination
        """
        with pytest.raises(ReportWriteError) as exc_info:
            JsonReportWriter().write(tmp_path, {"a": 1})

        assert exc_info.value.path == str(tmp_path)

    def test_unserializable_payload(self, tmp_path: Path) -> None:
        """Payloads that are not JSON serializable raise ReportWriteError."""
        with pytest.raises(ReportWriteError):
            JsonReportWriter().write(tmp_path / "report.json", {"a": object()})
