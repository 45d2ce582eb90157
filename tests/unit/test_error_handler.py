"""
Unit Tests for ErrorHandler.

Test Aspects Covered:
    ✅ Business Logic: Separate error boundaries per item
    ✅ Edge Cases: All succeed, all fail, non-isolated exceptions
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from training_reports.resilience.error_handler import (
    ConfigError,
    ErrorHandler,
    IsolatedRun,
    ParseError,
    ReportWriteError,
    TrainingReportsError,
)


class TestRunIsolated:
    """Test cases for run_isolated."""

    def test_all_succeed(self) -> None:
        """
        SCENARIO: All items process successfully
        EXPECTED: Every result kept in order, no failures
        """
        # Arrange
        handler = ErrorHandler()

        # Act
        result = handler.run_isolated(["a", "b", "c"], str.upper)

        # Assert
        assert result.successful == ["A", "B", "C"]
        assert result.failed == []
        assert not result.has_failures

    def test_write_failure_is_isolated(self) -> None:
        """
        SCENARIO: One item raises ReportWriteError
        EXPECTED: The remaining items still run
        """
        # Arrange
        handler = ErrorHandler()

        def processor(item: str) -> str:
            if item == "b":
                raise ReportWriteError("disk full", path="b.json")
            return item.upper()

        # Act
        result = handler.run_isolated(["a", "b", "c"], processor)

        # Assert
        assert result.successful == ["A", "C"]
        assert [item for item, _ in result.failed] == ["b"]
        assert isinstance(result.failed[0][1], ReportWriteError)
        assert result.has_failures

    def test_all_fail(self) -> None:
        """
        SCENARIO: Every item fails to write
        EXPECTED: Every item recorded as failed, nothing raised
        """
        handler = ErrorHandler()
        processor = Mock(side_effect=ReportWriteError("read-only file system"))

        result = handler.run_isolated([1, 2, 3], processor)

        assert result.successful == []
        assert [item for item, _ in result.failed] == [1, 2, 3]
        assert processor.call_count == 3

    def test_other_exceptions_propagate(self) -> None:
        """
        SCENARIO: Processor raises an exception that is not isolated
        EXPECTED: It propagates to the caller
        """
        handler = ErrorHandler()
        processor = Mock(side_effect=KeyError("bug"))

        with pytest.raises(KeyError):
            handler.run_isolated([1, 2], processor)

    def test_load_errors_are_not_isolated(self) -> None:
        """ParseError stays fatal under the default boundaries."""
        handler = ErrorHandler()
        processor = Mock(side_effect=ParseError("bad input"))

        with pytest.raises(ParseError):
            handler.run_isolated([1], processor)

    def test_custom_isolated_exceptions(self) -> None:
        """Configured exception types are recorded as failures."""
        handler = ErrorHandler(isolated_exceptions=(ZeroDivisionError,))

        result = handler.run_isolated([1, 0, 2], lambda x: 10 // x)

        assert result.successful == [10, 5]
        assert len(result.failed) == 1

    def test_empty_run(self) -> None:
        """An empty run has no failures."""
        assert not IsolatedRun().has_failures


class TestErrors:
    """Test cases for the exception hierarchy."""

    def test_errors_share_base_class(self) -> None:
        """Config, load and write errors are TrainingReportsErrors."""
        assert issubclass(ConfigError, TrainingReportsError)
        assert issubclass(ParseError, TrainingReportsError)
        assert issubclass(ReportWriteError, TrainingReportsError)

    def test_error_keeps_path(self) -> None:
        """Errors carry message and path."""
        error = ParseError("bad input", path="data/trainings.json")

        assert error.message == "bad input"
        assert error.path == "data/trainings.json"
        assert str(error) == "bad input"
