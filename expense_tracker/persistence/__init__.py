"""Mini README: Persistence subsystem package initialiser.

The package is split into ``base`` for contracts and errors, ``codec`` for
the stored payload format, ``registry`` and ``backends`` for key-value
storage, and ``adapter`` which the ledger store talks to.
"""

from .base import (
    DecodeError,
    KeyValueStore,
    MissingDataError,
    PersistenceError,
    PersistenceResult,
    StorageError,
)
from .registry import REGISTRY, StorageBackendRegistry
from . import backends  # noqa: F401  # ensure built-in backends register on import
from .backends import FileKeyValueStore, MemoryKeyValueStore
from .adapter import DEFAULT_STORAGE_KEY, PersistenceAdapter, build_adapter
from .codec import decode_transactions, encode_transactions

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "DecodeError",
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "MissingDataError",
    "PersistenceAdapter",
    "PersistenceError",
    "PersistenceResult",
    "REGISTRY",
    "StorageBackendRegistry",
    "StorageError",
    "build_adapter",
    "decode_transactions",
    "encode_transactions",
]
