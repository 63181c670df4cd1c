"""Storage Abstraction Layer for the text-patch MCP system.

Provides the read/write interface the file tools use to load text before a
patch and store it afterwards.

Usage:
    from text_patch_mcp.storage import get_storage

    storage = get_storage()
    content = await storage.read_file("/work/app.py")
    await storage.write_file("/work/app.py", content)
"""

from .base import FileInfo
from .base import StorageBackend
from .factory import StorageType
from .factory import get_storage
from .factory import reset_storage

__all__ = ["FileInfo", "StorageBackend", "StorageType", "get_storage", "reset_storage"]
