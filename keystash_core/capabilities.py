# keystash_core/capabilities.py

"""
keystash_core.capabilities
--------------------------
Tiered capability scale for external sites.

A host is granted a single numeric level. Every capability whose level is at
or below the granted level is allowed. ORDERED_PERMISSIONS must stay sorted
ascending by level: the resolver stops at the first entry above the queried
level instead of filtering the whole table.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple, Union
from .constants import NO_CAPABILITIES, NO_PERMISSIONS
from .errors import UnknownCapabilityError


@dataclass(frozen=True)
class Capability:
    identifier: str
    level: int
    description: str


# Always allowed, outside the level scale
NO_PERMISSIONS_REQUIRED = frozenset({"replaceURL"})

ORDERED_PERMISSIONS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (1, ("getPublicKey",)),
    (5, ("getRelays",)),
    (10, ("signEvent",)),
    (20, ("nip04.encrypt", "nip04.decrypt")),
)

PERMISSION_NAMES: Mapping[str, str] = MappingProxyType({
    "getPublicKey": "read your public key",
    "getRelays": "read your list of preferred relays",
    "signEvent": "sign events using your private key",
    "nip04.encrypt": "encrypt messages to peers",
    "nip04.decrypt": "decrypt messages from peers",
})

PERMISSIONS_REQUIRED: Mapping[str, int] = MappingProxyType({
    method: level
    for level, methods in ORDERED_PERMISSIONS
    for method in methods
})

CAPABILITIES: Tuple[Capability, ...] = tuple(
    Capability(identifier=method, level=level, description=PERMISSION_NAMES[method])
    for level, methods in ORDERED_PERMISSIONS
    for method in methods
)


def required_level(method: str) -> int:
    if method in NO_PERMISSIONS_REQUIRED:
        return 0
    try:
        return PERMISSIONS_REQUIRED[method]
    except KeyError:
        raise UnknownCapabilityError(method) from None


def is_allowed(method: str, level: int) -> bool:
    return required_level(method) <= level


def get_allowed_capabilities(level: int) -> Union[List[str], str]:
    """
    Descriptions of every capability granted at `level`, lowest level first.

    Returns the string "nothing" rather than an empty list when the level
    grants no capability.
    """
    methods: List[str] = []
    for perm, group in ORDERED_PERMISSIONS:
        if perm > level:
            break
        methods.extend(group)

    if not methods:
        return NO_CAPABILITIES

    return [PERMISSION_NAMES[m] for m in methods]


def get_permissions_string(level: int) -> str:
    """Render the capabilities of `level` as "A, B and C", or "none"."""
    capabilities = get_allowed_capabilities(level)

    if capabilities == NO_CAPABILITIES or not capabilities:
        return NO_PERMISSIONS
    if len(capabilities) == 1:
        return capabilities[0]

    return ", ".join(capabilities[:-1]) + " and " + capabilities[-1]
