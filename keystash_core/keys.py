from __future__ import annotations
from typing import Dict
from .constants import KEYS_KEY, CURRENT_PUBKEY_KEY, CURRENT_OPTIONS_PUBKEY_KEY
from .logger import get_logger
from .storage.models import KeyRecord
from .storage.provider import StorageProvider

log = get_logger("Keystash.Keys")


class KeyStore:
    """
    Identity records stored together under "keys", plus the public keys
    currently selected by the popup and the options page.
    """

    def __init__(self, storage: StorageProvider):
        self.storage = storage

    async def read_keys(self) -> Dict[str, KeyRecord]:
        data = await self.storage.get(KEYS_KEY) or {}
        return {pubkey: KeyRecord.from_dict(rec) for pubkey, rec in data.items()}

    async def save_keys(self, keys: Dict[str, KeyRecord]) -> None:
        await self.storage.set({KEYS_KEY: {pubkey: rec.to_dict() for pubkey, rec in keys.items()}})
        log.info(f"[KEYS] saved {len(keys)} identities")

    async def get_private_key(self, pubkey: str) -> str:
        keys = await self.read_keys()
        rec = keys.get(pubkey)
        if not rec:
            return ""
        return rec.private_key

    async def read_current_pubkey(self) -> str:
        return await self.storage.get(CURRENT_PUBKEY_KEY) or ""

    async def save_current_pubkey(self, pubkey: str) -> None:
        await self.storage.set({CURRENT_PUBKEY_KEY: pubkey})

    async def remove_current_pubkey(self) -> None:
        await self.storage.remove(CURRENT_PUBKEY_KEY)

    async def get_current_options_pubkey(self) -> str:
        return await self.storage.get(CURRENT_OPTIONS_PUBKEY_KEY) or ""

    async def save_current_options_pubkey(self, pubkey: str) -> None:
        await self.storage.set({CURRENT_OPTIONS_PUBKEY_KEY: pubkey})
