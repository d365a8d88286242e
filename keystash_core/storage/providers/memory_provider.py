import copy
from typing import Any, Dict, Optional
from keystash_core.storage.provider import StorageProvider


class InMemoryStorage(StorageProvider):
    def __init__(self):
        self.data: Dict[str, Any] = {}

    # values are copied both ways so callers only ever see stored blobs
    async def get(self, key: str) -> Optional[Any]:
        if key not in self.data:
            return None
        return copy.deepcopy(self.data[key])

    async def set(self, items: Dict[str, Any]) -> None:
        for key, value in items.items():
            self.data[key] = copy.deepcopy(value)

    async def remove(self, key: str) -> None:
        self.data.pop(key, None)
