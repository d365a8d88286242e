"""
keystash_core.profiles
----------------------
Per-identity profile blobs: site permissions, preferred relays and the
protocol handler. A profile lives under the identity's public key and every
save replaces the whole blob.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
from .errors import ProfileNotFoundError
from .logger import get_logger
from .storage.models import Profile
from .storage.provider import StorageProvider

log = get_logger("Keystash.Profiles")


class ProfileAccessor:
    def __init__(self, storage: StorageProvider):
        self.storage = storage

    async def get_or_create(self, pubkey: str) -> Tuple[Profile, bool]:
        """
        Return the stored profile, or create, persist and return an empty one.

        The second element is True only when the default was just written.
        """
        existing = await self.read_existing(pubkey)
        if existing is not None:
            return existing, False

        profile = Profile()
        await self.save(pubkey, profile)
        log.debug(f"[PROFILE] created default profile for {pubkey}")
        return profile, True

    async def read(self, pubkey: str) -> Profile:
        profile, _ = await self.get_or_create(pubkey)
        return profile

    async def read_existing(self, pubkey: str) -> Optional[Profile]:
        data = await self.storage.get(pubkey)
        if data is None:
            return None
        return Profile.from_dict(data)

    async def save(self, pubkey: str, profile: Profile) -> None:
        await self.storage.set({pubkey: profile.to_dict()})

    async def remove(self, pubkey: str) -> None:
        await self.storage.remove(pubkey)

    # --- relays / protocol handler ---

    async def read_relays(self, pubkey: str) -> Dict[str, Any]:
        profile = await self.read(pubkey)
        return profile.relays

    async def save_relays(self, pubkey: str, relays: Dict[str, Any]) -> None:
        profile = await self.read_existing(pubkey)
        if profile is None:
            raise ProfileNotFoundError(pubkey)

        profile.relays = dict(relays)
        await self.save(pubkey, profile)

    async def get_protocol_handler(self, pubkey: str) -> str:
        profile = await self.read(pubkey)
        return profile.protocol_handler

    async def save_protocol_handler(self, pubkey: str, handler: str) -> None:
        profile = await self.read_existing(pubkey)
        if profile is None:
            raise ProfileNotFoundError(pubkey)

        profile.protocol_handler = handler
        await self.save(pubkey, profile)
