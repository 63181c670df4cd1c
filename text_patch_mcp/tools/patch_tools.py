"""Patch Tool.

This module provides the fs_patch tool, which applies one targeted text
operation (prepend, append, replace or swap) to the first occurrence of a
search pattern in a file and reports the change as a unified diff.
"""

from mcp.server import FastMCP

from ..config import get_settings
from ..exceptions import PatchError
from ..helpers import _format_title
from ..helpers import _generate_content_diff
from ..helpers import _read_text
from ..helpers import _write_text
from ..logger_config import mcp_call_logger
from ..logger_config import log_mcp_call
from ..metrics_config import record_patch_outcome
from ..models import PatchData
from ..patch import Operation
from ..patch import compute_patch
from ..patch import edit_for
from ..storage import get_storage
from ..utils.syntax import validate_syntax
from ..utils.validation import assert_absolute_path
from ..utils.validation import format_display_path


def register_patch_tools(mcp_server: FastMCP) -> None:
    """Register the patch tool with the MCP server."""

    @mcp_server.tool()
    @log_mcp_call
    async def fs_patch(path: str, search: str, operation: Operation, content: str) -> str:
        """Modify a file with a targeted text operation on a matched pattern.

        Supports prepend, append, replace and swap on the first occurrence of
        the search text. Ideal for precise changes to configs, code or docs
        while preserving context. Not suitable for changing every occurrence of
        a pattern; rewrite the file with fs_create instead. Fails if the search
        text isn't found.

        Parameters:
            path (str): Absolute path of the file to modify
            search (str): Exact text to search for. If empty, the operation applies
                to the whole file: append/prepend add to the end/start, replace
                overwrites the file, swap leaves it unchanged
            operation (str): One of 'prepend', 'append', 'replace', 'swap'
            content (str): Text to prepend/append or to replace the match with.
                For 'swap', the other text to exchange the match with

        Returns:
            str: YAML front matter (path, total_chars, optional warning) followed
            by the unified diff of the change

        Example Usage:
            ```json
            {
                "name": "fs_patch",
                "arguments": {
                    "path": "/work/app/settings.py",
                    "search": "DEBUG = True",
                    "operation": "replace",
                    "content": "DEBUG = False"
                }
            }
            ```
        """
        file_path = assert_absolute_path(path)
        operation = Operation(operation)
        settings = get_settings()
        storage = get_storage()

        old_content = await _read_text(storage, path)

        try:
            result = compute_patch(old_content, search, edit_for(operation, content))
        except PatchError as e:
            record_patch_outcome(operation.value, e.error_code.lower())
            raise

        display_path = format_display_path(file_path, settings.cwd_path)
        diff = _generate_content_diff(old_content, result.content, display_path)

        await _write_text(storage, path, result.content)

        response = PatchData(path=str(file_path), total_chars=result.total_chars)
        if settings.validate_syntax:
            response.warning = validate_syntax(file_path, result.content)
        if result.swap_degraded:
            response.with_metadata("swap_degraded", True)

        record_patch_outcome(operation.value, "swap_degraded" if result.swap_degraded else "applied")
        mcp_call_logger.info(_format_title("Patch", display_path))
        mcp_call_logger.info(diff["summary"])

        return response.to_front_matter(diff["diff"] or "")
