"""
Keystash Core Package
=====================
Local key and permission store for a signing agent that answers requests
from external sites on behalf of its identities.

Provides:
- Tiered capability scale and its human-readable rendering
- Per-host permission grants with lazy expiry
- Per-identity profiles (permissions, relays, protocol handler) and key records
- Pluggable async key-value storage (SQLite default)
"""
