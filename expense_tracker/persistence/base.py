"""Mini README: Contracts shared by the persistence layer.

Structure:
    * PersistenceError and subclasses - failure taxonomy for storage and decoding.
    * PersistenceResult - value-or-error outcome returned by the adapter.
    * KeyValueStore - abstract get/set-by-key storage implemented by backends.

Backends move opaque byte payloads and know nothing about transactions. They
raise ``StorageError`` on I/O failure; the adapter turns those into failed
results so the ledger never has to catch anything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")


class PersistenceError(Exception):
    """Base class for every persistence failure."""


class StorageError(PersistenceError):
    """Raised when a backend cannot read or write its payload."""


class DecodeError(PersistenceError):
    """Raised when a stored payload is corrupt or uses an incompatible schema."""


class MissingDataError(PersistenceError):
    """Raised when nothing has been stored under the requested key."""


@dataclass(frozen=True, slots=True)
class PersistenceResult(Generic[T]):
    """Outcome of an adapter call: either a value or the error that prevented it."""

    value: Optional[T] = None
    error: Optional[PersistenceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "PersistenceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PersistenceError) -> "PersistenceResult[T]":
        return cls(error=error)


class KeyValueStore(ABC):
    """Base interface for byte-oriented key-value storage backends."""

    backend_name: str = "generic"

    def __init__(self) -> None:
        LOGGER.debug("Initialising %s storage backend", self.backend_name)

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the payload stored under ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, payload: bytes) -> None:
        """Replace the payload stored under ``key``."""

    def metadata(self) -> dict[str, str]:
        """Return diagnostic details for status output."""

        return {"backend": self.backend_name}
