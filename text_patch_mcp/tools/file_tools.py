"""File Access Tools.

This module provides the tools that load and store whole files:
- fs_read: Read a file with its line count
- fs_create: Create a file, or overwrite one when explicitly asked
"""

from mcp.server import FastMCP

from ..config import get_settings
from ..exceptions import ValidationError
from ..helpers import _count_lines
from ..helpers import _format_title
from ..helpers import _read_text
from ..helpers import _write_text
from ..logger_config import log_mcp_call
from ..logger_config import mcp_call_logger
from ..models import FileReadData
from ..models import FileWriteData
from ..storage import get_storage
from ..utils.validation import assert_absolute_path
from ..utils.validation import format_display_path


def register_file_tools(mcp_server: FastMCP) -> None:
    """Register file access tools with the MCP server."""

    @mcp_server.tool()
    @log_mcp_call
    async def fs_read(path: str) -> str:
        """Read the full text of a file.

        Parameters:
            path (str): Absolute path of the file to read

        Returns:
            str: YAML front matter (path, total_lines) followed by the file content
        """
        file_path = assert_absolute_path(path)
        content = await _read_text(get_storage(), path)

        display_path = format_display_path(file_path, get_settings().cwd_path)
        mcp_call_logger.info(_format_title("Read", display_path))

        return FileReadData(path=str(file_path), total_lines=_count_lines(content)).to_front_matter(content)

    @mcp_server.tool()
    @log_mcp_call
    async def fs_create(path: str, content: str, overwrite: bool = False) -> str:
        """Create a file with the given content.

        Parent directories are created as needed. Use fs_patch for targeted
        changes to an existing file.

        Parameters:
            path (str): Absolute path of the file to write
            content (str): Complete file content
            overwrite (bool): Replace the file if it already exists (default: False)

        Returns:
            str: YAML front matter (path, bytes_written, was_update) followed by a
            one-line summary
        """
        file_path = assert_absolute_path(path)
        storage = get_storage()

        exists = await storage.file_exists(path)
        if exists and not overwrite:
            raise ValidationError(
                f"File already exists: {path}. Set overwrite to true to replace it.",
                field="path",
                value=path,
            )

        await _write_text(storage, path, content)

        display_path = format_display_path(file_path, get_settings().cwd_path)
        action = "Overwrite" if exists else "Create"
        mcp_call_logger.info(_format_title(action, display_path))

        response = FileWriteData(
            path=str(file_path),
            bytes_written=len(content.encode("utf-8")),
            was_update=exists,
        )
        return response.to_front_matter(f"{'Updated' if exists else 'Created'} {display_path}\n")
