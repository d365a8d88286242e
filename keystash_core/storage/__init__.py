# keystash_core/storage/__init__.py

from .models import KeyRecord, PermissionGrant, Profile
from .provider import StorageProvider
from .providers.memory_provider import InMemoryStorage
from .providers.sqlite_provider import SQLiteStorage
from keystash_core.constants import DEFAULT_DB_PATH
from pathlib import Path
import os


def load_storage_provider(config: dict | None = None) -> StorageProvider:
    """
    Factory resolver for selecting the key-value backend.

        - sqlite (default)
        - memory
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("KEYSTASH_STORAGE_PROVIDER", "sqlite")

    if provider == "memory":
        return InMemoryStorage()

    if provider == "sqlite":
        raw_path = config.get("sqlite_path") or os.getenv("KEYSTASH_DB_PATH") or DEFAULT_DB_PATH
        db_path = Path(raw_path).expanduser()
        return SQLiteStorage(str(db_path))

    raise ValueError(f"Unknown storage provider: {provider}")


__all__ = [
    "KeyRecord",
    "PermissionGrant",
    "Profile",
    "StorageProvider",
    "InMemoryStorage",
    "SQLiteStorage",
    "load_storage_provider",
]
