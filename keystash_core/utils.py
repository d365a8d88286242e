"""
keystash_core.utils
-------------------
Small helpers for epoch timestamps and canonical JSON serialization of
stored blobs.
"""

from __future__ import annotations
import json, math
from typing import Any


def epoch_seconds(ts: float) -> int:
    # Half-up rounding to whole seconds
    return int(math.floor(ts + 0.5))


def canonical_json(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def from_json(text: str) -> Any:
    return json.loads(text)
