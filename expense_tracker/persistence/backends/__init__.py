"""Mini README: Concrete key-value storage backends.

Each module subclasses ``KeyValueStore`` and calls ``REGISTRY.register``
on import so the backend can be selected by name from configuration.
"""

from .file import FileKeyValueStore
from .memory import MemoryKeyValueStore

__all__ = ["FileKeyValueStore", "MemoryKeyValueStore"]
