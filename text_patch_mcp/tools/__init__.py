"""Tool category modules for the text-patch MCP system.

This package contains MCP tools organized by functional categories:
- file_tools: Whole-file access (fs_read, fs_create)
- patch_tools: Targeted text operations on a matched pattern (fs_patch)
"""

from .file_tools import register_file_tools
from .patch_tools import register_patch_tools

__all__ = [
    "register_file_tools",
    "register_patch_tools",
]
