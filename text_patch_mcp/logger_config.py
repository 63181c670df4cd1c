import datetime
import functools
import inspect
import json
import logging
import traceback
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from .metrics_config import record_tool_call_error
from .metrics_config import record_tool_call_start
from .metrics_config import record_tool_call_success


# --- Error Classification ---
class ErrorCategory(Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_CATEGORY_LEVELS = {
    ErrorCategory.CRITICAL: logging.CRITICAL,
    ErrorCategory.ERROR: logging.ERROR,
    ErrorCategory.WARNING: logging.WARNING,
    ErrorCategory.INFO: logging.INFO,
}

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_RECORD_ATTRS = set(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class StructuredLogFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.datetime.fromtimestamp(
                record.created, tz=datetime.timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
            }

        for key, value in vars(record).items():
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


# --- Logging Setup ---
_log_dir = Path(__file__).resolve().parent

mcp_call_logger = logging.getLogger("mcp_call_logger")
mcp_call_logger.setLevel(logging.INFO)

# Use RotatingFileHandler for log rotation
# maxBytes: 10MB per file, backupCount: 5 files (total ~50MB)
file_handler = RotatingFileHandler(
    _log_dir / "mcp_calls.log", maxBytes=10 * 1024 * 1024, backupCount=5, delay=True
)
file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
mcp_call_logger.addHandler(file_handler)
# Prevent logs from propagating to the root logger if not desired
mcp_call_logger.propagate = False

error_logger = logging.getLogger("error_logger")
error_logger.setLevel(logging.INFO)

error_file_handler = RotatingFileHandler(
    _log_dir / "errors.log", maxBytes=10 * 1024 * 1024, backupCount=5, delay=True
)
error_file_handler.setFormatter(StructuredLogFormatter())
error_logger.addHandler(error_file_handler)
error_logger.propagate = False


def configure_logging(level: str = "INFO", structured: bool = True) -> None:
    """Apply the configured level and format to the tool loggers."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    mcp_call_logger.setLevel(numeric_level)
    error_logger.setLevel(numeric_level)
    if not structured:
        error_file_handler.setFormatter(file_handler.formatter)


def log_structured_error(
    category: ErrorCategory,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    operation: str | None = None,
    **kwargs: Any,
) -> None:
    """Log an error with its category, operation and context as structured fields."""
    extra: dict[str, Any] = {"error_category": category.value}
    if operation:
        extra["operation"] = operation
    if context:
        extra.update(context)
    extra.update(kwargs)

    error_logger.log(
        _CATEGORY_LEVELS[category],
        message,
        exc_info=exception,
        extra=extra,
    )


def _describe(value: Any) -> str:
    if hasattr(value, "model_dump_json"):  # Pydantic v2 model
        return value.model_dump_json(indent=None, exclude_none=True)
    return repr(value)


def _format_call(args: tuple, kwargs: dict) -> str:
    try:
        logged_args = [_describe(arg) for arg in args]
        logged_kwargs = {k: _describe(v) for k, v in kwargs.items()}
        return f"args={logged_args}, kwargs={logged_kwargs}"
    except Exception as e:
        return f"args/kwargs logging error: {e}"


def _log_failure(func_name: str, start_time: float | None, error: Exception) -> None:
    record_tool_call_error(func_name, start_time, error)
    mcp_call_logger.error(f"Tool {func_name} raised exception: {error}", exc_info=True)
    log_structured_error(
        category=ErrorCategory.ERROR,
        message=f"Tool {func_name} failed: {error}",
        exception=error,
        operation="tool_execution",
        function=func_name,
    )


def _log_success(func_name: str, start_time: float | None, result: Any) -> None:
    result_str = _describe(result)
    record_tool_call_success(func_name, start_time, len(result_str.encode("utf-8")))
    mcp_call_logger.info(f"Tool {func_name} returned: {result_str}")


# --- Decorator for Logging MCP Calls with Metrics ---
def log_mcp_call(func):
    """Log arguments, results and failures of an MCP tool, sync or async.

    Exceptions are logged and re-raised unchanged.
    """
    func_name = getattr(func, "__name__", "unknown_function")

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = record_tool_call_start(func_name, args, kwargs)
            mcp_call_logger.info(f"Calling tool: {func_name} with {_format_call(args, kwargs)}")
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log_failure(func_name, start_time, e)
                raise
            _log_success(func_name, start_time, result)
            return result

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = record_tool_call_start(func_name, args, kwargs)
        mcp_call_logger.info(f"Calling tool: {func_name} with {_format_call(args, kwargs)}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _log_failure(func_name, start_time, e)
            raise
        _log_success(func_name, start_time, result)
        return result

    return wrapper
