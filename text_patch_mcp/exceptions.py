"""Exception hierarchy for the text-patch MCP system.

Every error raised by the engine, the storage layer or the tools derives from
TextPatchError so callers can catch the whole family at once and still read a
stable ``error_code`` and a user-facing message.
"""

from __future__ import annotations

from typing import Any


class TextPatchError(Exception):
    """Base class for all text-patch errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.user_message = user_message or message

    def to_dict(self) -> dict[str, Any]:
        """Convert the error into a serializable dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


class ValidationError(TextPatchError):
    """Raised when tool input fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        details = dict(details or {})
        if field:
            details["field"] = field
        if value is not None:
            details["invalid_value"] = value
        super().__init__(message, error_code="VALIDATION_ERROR", details=details)


class PatchError(TextPatchError):
    """Base class for failures of the patch engine."""

    def __init__(self, message: str, pattern: str, error_code: str, user_message: str):
        super().__init__(
            message,
            error_code=error_code,
            details={"pattern": pattern},
            user_message=user_message,
        )
        self.pattern = pattern


class NoMatchError(PatchError):
    """The search pattern does not occur in the source text."""

    def __init__(self, pattern: str):
        super().__init__(
            f"Could not find match for search text: {pattern}",
            pattern=pattern,
            error_code="NO_MATCH",
            user_message="Could not find the text to patch. Check that the search text matches the file exactly.",
        )


class NoSwapTargetError(PatchError):
    """The second pattern of a swap does not occur in the source text."""

    def __init__(self, pattern: str):
        super().__init__(
            f"Could not find swap target text: {pattern}",
            pattern=pattern,
            error_code="NO_SWAP_TARGET",
            user_message="Could not find the text to swap with. Check that the target text matches the file exactly.",
        )


class FileSystemError(TextPatchError):
    """Raised when reading or writing a file fails."""

    def __init__(self, operation: str, file_path: str, failure_reason: str):
        super().__init__(
            f"Failed to {operation} file '{file_path}': {failure_reason}",
            error_code="FILE_SYSTEM_ERROR",
            details={
                "operation": operation,
                "file_path": file_path,
                "failure_reason": failure_reason,
            },
            user_message=f"File operation failed: {failure_reason}",
        )


class MCPToolError(TextPatchError):
    """Raised when an MCP tool cannot be dispatched."""

    def __init__(self, tool_name: str, failure_reason: str):
        super().__init__(
            f"MCP tool '{tool_name}' failed: {failure_reason}",
            error_code="MCP_TOOL_ERROR",
            details={"tool_name": tool_name, "failure_reason": failure_reason},
        )
