"""Storage backend selection.

The backend comes from the ``STORAGE_BACKEND`` setting. Only the local
filesystem is available; ``auto`` resolves to it.
"""

from __future__ import annotations

from enum import Enum

from ..config import get_settings
from .base import StorageBackend
from .local import LocalStorageBackend


class StorageType(Enum):
    LOCAL = "local"


def detect_environment() -> StorageType:
    """Map the configured backend name to a StorageType.

    Raises:
        ValueError: For any backend name other than 'auto' or 'local'
    """
    backend = get_settings().storage_backend.strip().lower()
    if backend in ("", "auto"):
        return StorageType.LOCAL
    try:
        return StorageType(backend)
    except ValueError:
        raise ValueError(f"Unsupported storage backend: {backend}") from None


def create_storage_backend(storage_type: StorageType | None = None, root_dir: str | None = None) -> StorageBackend:
    """Build a backend of ``storage_type``, detected from settings when omitted.

    ``root_dir`` defaults to the ``STORAGE_ROOT_DIR`` setting.
    """
    if storage_type is None:
        storage_type = detect_environment()
    if storage_type is StorageType.LOCAL:
        return LocalStorageBackend(root_dir=root_dir or get_settings().storage_root_dir)
    raise ValueError(f"Unsupported storage type: {storage_type}")


_storage_instance: StorageBackend | None = None


def get_storage(root_dir: str | None = None) -> StorageBackend:
    """Return the shared backend, creating it on first use.

    ``root_dir`` only has an effect on the call that creates the backend.
    """
    global _storage_instance
    if _storage_instance is None:
        _storage_instance = create_storage_backend(root_dir=root_dir)
    return _storage_instance


def reset_storage() -> None:
    """Drop the shared backend so the next call rebuilds it from settings."""
    global _storage_instance
    _storage_instance = None
