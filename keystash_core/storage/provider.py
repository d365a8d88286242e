# keystash_core/storage/provider.py
from __future__ import annotations
from typing import Any, Dict, Optional


class StorageProvider:
    """
    Async key-value collaborator.

    Values are opaque JSON-compatible blobs. Every `set` replaces the whole
    value of each key it names; there are no partial updates. Failures
    propagate to the caller untouched.
    """

    # Interface
    async def get(self, key: str) -> Optional[Any]: ...
    async def set(self, items: Dict[str, Any]) -> None: ...
    async def remove(self, key: str) -> None: ...

    async def close(self) -> None:
        return
