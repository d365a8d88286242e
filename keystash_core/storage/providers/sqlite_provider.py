from __future__ import annotations
from typing import Optional, Dict, Any
import asyncio, sqlite3, os, threading
from keystash_core.storage.provider import StorageProvider
from keystash_core.utils import canonical_json, from_json
from keystash_core.logger import get_logger

log = get_logger("Keystash.Storage")


class SQLiteStorage(StorageProvider):
    """
    Key-value blobs in a single SQLite table.

    sqlite3 is blocking, so each call is pushed onto a worker thread with
    asyncio.to_thread and the connection is guarded by a lock.
    """

    def __init__(self, path="db/keystash.db"):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.path = path
        self.db = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.Lock()

        self._init()

    def _init(self) -> None:
        self.db.execute("""CREATE TABLE IF NOT EXISTS kv(
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )""")
        self.db.commit()

    # --- blocking helpers (run on a worker thread) ---

    def _get(self, key: str) -> Optional[Any]:
        with self._lock:
            cur = self.db.execute("SELECT value FROM kv WHERE key=?", (key,))
            row = cur.fetchone()
        if not row:
            return None
        return from_json(row[0])

    def _set(self, items: Dict[str, Any]) -> None:
        rows = [(key, canonical_json(value)) for key, value in items.items()]
        with self._lock:
            self.db.executemany(
                "INSERT INTO kv(key,value) VALUES(?,?) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                rows,
            )
            self.db.commit()

    def _remove(self, key: str) -> None:
        with self._lock:
            self.db.execute("DELETE FROM kv WHERE key=?", (key,))
            self.db.commit()

    # --- StorageProvider ---

    async def get(self, key: str) -> Optional[Any]:
        return await asyncio.to_thread(self._get, key)

    async def set(self, items: Dict[str, Any]) -> None:
        await asyncio.to_thread(self._set, items)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._remove, key)

    async def close(self) -> None:
        log.debug(f"[SQLITE] closing {self.path}")
        self.db.close()
