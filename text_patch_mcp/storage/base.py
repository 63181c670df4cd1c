"""Interface between the file tools and wherever the files live.

Backends hand the tools decoded text and take decoded text back, so the
patch engine never sees bytes or encodings.
"""
from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass
class FileInfo:
    """Size, modification time and content type of a stored file."""

    path: str
    size: int
    last_modified: datetime
    content_type: str = "text/plain"


class StorageBackend(ABC):
    """Text file access used by fs_read, fs_create and fs_patch.

    Paths may be absolute or relative to ``root_path``.
    """

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Short identifier shown by the health endpoint, e.g. 'local'."""

    @property
    @abstractmethod
    def root_path(self) -> str:
        """Directory that relative paths resolve against."""

    @abstractmethod
    async def read_file(self, path: str) -> str:
        """Return the decoded text of a file, line endings untouched.

        Raises:
            FileNotFoundError: If there is no regular file at ``path``
            UnicodeDecodeError: If the file is not valid UTF-8
        """

    @abstractmethod
    async def write_file(self, path: str, content: str) -> None:
        """Replace the file at ``path`` with ``content``, creating parent directories."""

    @abstractmethod
    async def file_exists(self, path: str) -> bool:
        """Check whether ``path`` is an existing regular file."""

    @abstractmethod
    async def get_file_info(self, path: str) -> FileInfo | None:
        """Return metadata for ``path``, or None if it is not a file."""
