"""Clean client interface for the text-patch MCP tools.

This module provides a Python interface to the registered MCP tools, so tests
and agents can call them without going through a transport. ``call_tool``
dispatches a request by tool name and reports failures as a ToolResult
instead of raising.
"""
from __future__ import annotations

from typing import Any

from .exceptions import MCPToolError
from .fs_tool_server import mcp_server
from .models import ToolResult
from .models import parse_front_matter


def _get_mcp_tool(tool_name: str):
    """Get a registered MCP tool function by name."""
    if (
        hasattr(mcp_server, "_tool_manager")
        and hasattr(mcp_server._tool_manager, "_tools")
        and tool_name in mcp_server._tool_manager._tools
    ):
        tool = mcp_server._tool_manager._tools[tool_name]
        if hasattr(tool, "fn"):
            return tool.fn
    raise MCPToolError(tool_name, "not found or not properly registered")


async def fs_read(path: str) -> str:
    """Read a file with its front matter record."""
    return await _get_mcp_tool("fs_read")(path)


async def fs_create(path: str, content: str, overwrite: bool = False) -> str:
    """Create (or overwrite) a file."""
    return await _get_mcp_tool("fs_create")(path, content, overwrite)


async def fs_patch(path: str, search: str, operation: str, content: str) -> str:
    """Apply one patch operation to the first match of ``search`` in a file."""
    return await _get_mcp_tool("fs_patch")(path, search, operation, content)


async def call_tool(name: str, arguments: dict[str, Any], call_id: str | None = None) -> ToolResult:
    """Dispatch a tool call and wrap its outcome in a ToolResult.

    Raises:
        MCPToolError: If no tool with this name is registered
    """
    tool = _get_mcp_tool(name)
    result = ToolResult(name=name, call_id=call_id)
    try:
        content = await tool(**arguments)
    except Exception as e:
        return result.failure(e)

    result.data, _ = parse_front_matter(content)
    return result.success(content)
