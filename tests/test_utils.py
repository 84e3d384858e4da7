"""Tests for utility functions."""
import logging
from unittest.mock import patch

import pytest

from shipit.core.reporter import Reporter
from shipit.exceptions import ActionCancelledError, ShipitError
from shipit.utils import configure_logging, handle_errors, loading_status


def test_loading_status_success():
    """
    Test loading_status context manager success case.
    Expected: context manager completes without exceptions.
    """
    # Act & Assert - context manager should not raise
    with loading_status("Testing", "Success"):
        pass


def test_loading_status_exception_propagation():
    """
    Test that loading_status propagates exceptions.
    Expected: exception is re-raised after being caught.
    """
    # Arrange - prepare exception
    test_exception = ValueError("Test error")

    # Act & Assert - exception should be propagated
    with pytest.raises(ValueError, match="Test error"):
        with loading_status("Testing", "Success"):
            raise test_exception


@patch("shipit.utils.console")
def test_reporter_step_writes_to_its_own_console(mock_console, console_streams):
    """
    Test a failing reporter step.
    Expected: failure line on the reporter's console, shared console untouched.
    """
    # Arrange
    console, stdout, _ = console_streams
    reporter = Reporter(console)

    # Act
    with pytest.raises(ShipitError):
        with reporter.step("Deploying service api"):
            raise ShipitError("boom [x]")

    # Assert
    assert "Failed: boom [x]" in stdout.getvalue()
    mock_console.print.assert_not_called()


@patch("shipit.utils.console")
def test_handle_errors_reports_and_exits(mock_console):
    """
    Test handle_errors with a shipit error.
    Expected: error printed, exit status 1.
    """
    # Arrange - create decorated function that raises
    @handle_errors
    def failing_function():
        raise ShipitError("Test error")

    # Act
    with pytest.raises(SystemExit) as exc_info:
        failing_function()

    # Assert
    assert exc_info.value.code == 1
    assert "Error: Test error" in mock_console.print.call_args[0][0]


@patch("shipit.utils.console")
def test_handle_errors_unexpected_exception(mock_console):
    """
    Test handle_errors with an unexpected exception.
    Expected: 'Unexpected error' printed, exit status 1.
    """
    # Arrange
    @handle_errors
    def failing_function():
        raise ValueError("boom")

    # Act
    with pytest.raises(SystemExit) as exc_info:
        failing_function()

    # Assert
    assert exc_info.value.code == 1
    assert "Unexpected error: boom" in mock_console.print.call_args[0][0]


@patch("shipit.utils.console")
def test_handle_errors_cancellation(mock_console):
    """
    Test handle_errors on cancellation.
    Expected: exit status 130.
    """
    # Arrange
    @handle_errors
    def cancelled():
        raise ActionCancelledError("stop")

    # Act & Assert
    with pytest.raises(SystemExit) as exc_info:
        cancelled()
    assert exc_info.value.code == 130


def test_handle_errors_passes_return_value():
    """
    Test handle_errors on success.
    Expected: wrapped function's return value.
    """
    # Act & Assert
    assert handle_errors(lambda: 42)() == 42


def test_configure_logging_levels():
    """
    Test logging configuration.
    Expected: DEBUG with debug, WARNING otherwise, single rich handler.
    """
    # Act
    configure_logging(debug=True)
    configure_logging(debug=True)

    # Assert
    logger = logging.getLogger("shipit")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging(debug=False)
    assert logger.level == logging.WARNING
