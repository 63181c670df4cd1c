"""Unit tests for logging configuration and the MCP call decorator."""

import json
import logging
import sys

import pytest

from text_patch_mcp.logger_config import ErrorCategory
from text_patch_mcp.logger_config import StructuredLogFormatter
from text_patch_mcp.logger_config import configure_logging
from text_patch_mcp.logger_config import error_logger
from text_patch_mcp.logger_config import log_mcp_call
from text_patch_mcp.logger_config import log_structured_error
from text_patch_mcp.logger_config import mcp_call_logger


def _record(message="Test message", exc_info=None, **extra):
    record = logging.LogRecord(
        name="test_logger",
        level=logging.ERROR,
        pathname="/path/to/module.py",
        lineno=42,
        msg=message,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredLogFormatter:
    def test_basic_fields(self):
        entry = json.loads(StructuredLogFormatter().format(_record()))

        assert entry["level"] == "ERROR"
        assert entry["logger"] == "test_logger"
        assert entry["message"] == "Test message"
        assert entry["module"] == "module"
        assert entry["line"] == 42
        assert "timestamp" in entry

    def test_exception_details(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = _record(exc_info=sys.exc_info())

        entry = json.loads(StructuredLogFormatter().format(record))

        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "bad value"
        assert isinstance(entry["exception"]["traceback"], list)

    def test_extra_fields_are_included(self):
        entry = json.loads(StructuredLogFormatter().format(_record(operation="tool_execution")))

        assert entry["operation"] == "tool_execution"


class TestLogStructuredError:
    def test_logs_with_category_level(self, mocker):
        mock_log = mocker.patch.object(error_logger, "log")

        log_structured_error(
            ErrorCategory.WARNING,
            "Something odd",
            context={"path": "/a.txt"},
            operation="fs_patch",
        )

        mock_log.assert_called_once()
        level, message = mock_log.call_args.args
        extra = mock_log.call_args.kwargs["extra"]
        assert level == logging.WARNING
        assert message == "Something odd"
        assert extra == {"error_category": "WARNING", "operation": "fs_patch", "path": "/a.txt"}

    def test_passes_exception(self, mocker):
        mock_log = mocker.patch.object(error_logger, "log")
        error = RuntimeError("boom")

        log_structured_error(ErrorCategory.CRITICAL, "Failed", exception=error)

        assert mock_log.call_args.args[0] == logging.CRITICAL
        assert mock_log.call_args.kwargs["exc_info"] is error


class TestLogMcpCall:
    @pytest.mark.asyncio
    async def test_async_success(self, mocker):
        mock_info = mocker.patch.object(mcp_call_logger, "info")

        @log_mcp_call
        async def sample_tool(path):
            return f"read {path}"

        assert await sample_tool("/a.txt") == "read /a.txt"
        assert sample_tool.__name__ == "sample_tool"
        messages = [call.args[0] for call in mock_info.call_args_list]
        assert messages[0].startswith("Calling tool: sample_tool with args=[\"'/a.txt'\"]")
        assert messages[1] == "Tool sample_tool returned: 'read /a.txt'"

    @pytest.mark.asyncio
    async def test_async_failure_is_logged_and_reraised(self, mocker):
        mocker.patch.object(mcp_call_logger, "info")
        mock_error = mocker.patch.object(mcp_call_logger, "error")
        mock_structured = mocker.patch("text_patch_mcp.logger_config.log_structured_error")

        @log_mcp_call
        async def failing_tool():
            raise ValueError("no match")

        with pytest.raises(ValueError, match="no match"):
            await failing_tool()

        mock_error.assert_called_once()
        assert mock_structured.call_args.kwargs["operation"] == "tool_execution"
        assert mock_structured.call_args.kwargs["function"] == "failing_tool"

    def test_sync_function(self, mocker):
        mocker.patch.object(mcp_call_logger, "info")

        @log_mcp_call
        def add(a, b):
            return a + b

        assert add(2, 3) == 5


class TestConfigureLogging:
    def test_sets_levels(self):
        try:
            configure_logging("warning")

            assert mcp_call_logger.level == logging.WARNING
            assert error_logger.level == logging.WARNING
        finally:
            configure_logging("INFO")

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")

        assert mcp_call_logger.level == logging.INFO
