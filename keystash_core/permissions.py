"""
keystash_core.permissions
-------------------------
Per-host grants for each identity.

Grants marked "expirable" last five minutes. Expiry is lazy: nothing sweeps
storage in the background, a stale grant is dropped (and the profile
rewritten) the next time that identity's permissions are read.

There is no locking around the read-modify-write of a profile. Two
concurrent updates for the same identity can lose one of the writes.
"""

from __future__ import annotations
import time
from typing import Any, Callable, Dict, Mapping
from .capabilities import is_allowed
from .constants import CONDITION_EXPIRABLE, EXPIRY_WINDOW_SECONDS
from .errors import InvalidPolicyError, ProfileNotFoundError
from .logger import get_logger
from .profiles import ProfileAccessor
from .storage.models import PermissionGrant
from .utils import epoch_seconds

log = get_logger("Keystash.Permissions")


class PermissionStore:
    def __init__(self, profiles: ProfileAccessor, clock: Callable[[], float] = time.time):
        self.profiles = profiles
        self.clock = clock

    async def read_permissions(self, pubkey: str) -> Dict[str, PermissionGrant]:
        """Host -> grant for `pubkey`, with expired expirable grants removed."""
        profile = await self.profiles.read(pubkey)
        permissions = profile.permissions

        cutoff = self.clock() - EXPIRY_WINDOW_SECONDS
        expired = [
            host for host, grant in permissions.items()
            if grant.condition == CONDITION_EXPIRABLE and grant.created_at < cutoff
        ]
        for host in expired:
            del permissions[host]

        if expired:
            log.info(f"[PERMISSIONS] expired {pubkey} hosts={expired}")
            await self.profiles.save(pubkey, profile)
        return permissions

    async def read_permission_level(self, pubkey: str, host: str) -> int:
        permissions = await self.read_permissions(pubkey)
        grant = permissions.get(host)
        if grant is None:
            return 0
        return grant.level

    async def check_permission(self, pubkey: str, host: str, method: str) -> bool:
        level = await self.read_permission_level(pubkey, host)
        return is_allowed(method, level)

    async def update_permission(self, pubkey: str, host: str, policy: Mapping[str, Any]) -> PermissionGrant:
        """
        Grant `policy` ({"level", "condition", ...}) to `host`, replacing any
        previous grant and stamping created_at with the current time.

        Unlike the read paths this does not create a missing profile.
        """
        level = policy.get("level")
        if isinstance(level, bool) or not isinstance(level, int) or level < 0:
            raise InvalidPolicyError(f"Invalid permission level for {host}: {level!r}")

        profile = await self.profiles.read_existing(pubkey)
        if profile is None:
            raise ProfileNotFoundError(pubkey)

        grant = PermissionGrant.from_dict(host, dict(policy))
        grant.created_at = epoch_seconds(self.clock())
        profile.permissions[host] = grant

        await self.profiles.save(pubkey, profile)
        log.info(f"[PERMISSIONS] granted {pubkey} host={host} level={grant.level} condition={grant.condition}")
        return grant

    async def remove_permissions(self, pubkey: str, host: str) -> None:
        profile = await self.profiles.read(pubkey)
        profile.permissions.pop(host, None)

        await self.profiles.save(pubkey, profile)
        log.info(f"[PERMISSIONS] revoked {pubkey} host={host}")
