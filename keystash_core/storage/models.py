# keystash_core/storage/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

_GRANT_FIELDS = ("level", "condition", "created_at")


@dataclass
class KeyRecord:
    """
    One identity in the "keys" blob, keyed there by its public key.
    """
    name: str
    private_key: str
    created_at: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "private_key": self.private_key, "created_at": self.created_at}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyRecord":
        return cls(
            name=data.get("name", ""),
            private_key=data.get("private_key", ""),
            created_at=data.get("created_at", 0),
        )


@dataclass
class PermissionGrant:
    """
    Level granted to one host for one identity.

    Any extra policy keys supplied when granting are kept in `meta` and
    written back flat next to level/condition/created_at.
    """
    host: str
    level: int
    condition: str
    created_at: int
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        d = dict(self.meta)
        d.update(level=self.level, condition=self.condition, created_at=self.created_at)
        return d

    @classmethod
    def from_dict(cls, host: str, data: Dict[str, Any]) -> "PermissionGrant":
        return cls(
            host=host,
            level=data.get("level", 0),
            condition=data.get("condition", ""),
            created_at=data.get("created_at") or 0,
            meta={k: v for k, v in data.items() if k not in _GRANT_FIELDS},
        )


@dataclass
class Profile:
    permissions: Dict[str, PermissionGrant] = field(default_factory=dict)
    relays: Dict[str, Any] = field(default_factory=dict)
    protocol_handler: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "permissions": {host: grant.to_dict() for host, grant in self.permissions.items()},
            "relays": dict(self.relays),
            "protocol_handler": self.protocol_handler,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            permissions={
                host: PermissionGrant.from_dict(host, grant)
                for host, grant in (data.get("permissions") or {}).items()
            },
            relays=dict(data.get("relays") or {}),
            protocol_handler=data.get("protocol_handler") or "",
        )
