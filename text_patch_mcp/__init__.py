"""Text Patch MCP - targeted, deterministic file patching over MCP.

Core engine:
    from text_patch_mcp.patch import apply_replacement

    apply_replacement("Hello World", "World", "replace", "Forge")  # "Hello Forge"

MCP server:
    python -m text_patch_mcp.fs_tool_server stdio
"""

__version__ = "1.0.0"
