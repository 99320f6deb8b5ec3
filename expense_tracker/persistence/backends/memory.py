"""Mini README: Dict-backed storage backend.

Structure:
    * MemoryKeyValueStore - keeps payloads in process memory.

Useful for tests and throwaway sessions; nothing survives the process.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..base import KeyValueStore
from ..registry import REGISTRY


class MemoryKeyValueStore(KeyValueStore):
    """Store payloads in a plain dictionary."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, bytes]] = None) -> None:
        super().__init__()
        self._payloads: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._payloads.get(key)

    def set(self, key: str, payload: bytes) -> None:
        self._payloads[key] = bytes(payload)


REGISTRY.register(MemoryKeyValueStore)
