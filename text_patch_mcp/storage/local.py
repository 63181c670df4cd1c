"""Filesystem storage backend.

Files are read and written as UTF-8 with newline translation disabled, so a
patch changes exactly the bytes it targets and nothing else.
"""

from __future__ import annotations

from datetime import datetime
from datetime import timezone
from pathlib import Path

from .base import FileInfo
from .base import StorageBackend

CONTENT_TYPES = {
    ".py": "text/x-python",
    ".md": "text/markdown",
    ".txt": "text/plain",
    ".json": "application/json",
    ".toml": "application/toml",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
}


class LocalStorageBackend(StorageBackend):
    """Read and write files on the local disk.

    Args:
        root_dir: Directory relative paths resolve against; absolute paths
                  bypass it. Defaults to the current directory.
    """

    def __init__(self, root_dir: str | None = None):
        self._root = Path(root_dir or ".").resolve()

    @property
    def backend_type(self) -> str:
        return "local"

    @property
    def root_path(self) -> str:
        return str(self._root)

    def _resolve(self, path: str) -> Path:
        # Joining an absolute path discards the root
        return self._root / path

    async def read_file(self, path: str) -> str:
        target = self._resolve(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        with target.open(encoding="utf-8", newline="") as handle:
            return handle.read()

    async def write_file(self, path: str, content: str) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    async def file_exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    async def get_file_info(self, path: str) -> FileInfo | None:
        target = self._resolve(path)
        if not target.is_file():
            return None

        stat = target.stat()
        return FileInfo(
            path=path,
            size=stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            content_type=CONTENT_TYPES.get(target.suffix.lower(), "application/octet-stream"),
        )
