"""Mini README: Registry of key-value storage backends.

Structure:
    * StorageBackendRegistry - maps backend names to ``KeyValueStore`` classes.

Backends register themselves on import, so configuration only has to name
one (``file`` or ``memory``) to get a ready instance.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import KeyValueStore
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageBackendRegistry:
    """Simple registry for mapping backend identifiers to classes."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[KeyValueStore]] = {}

    def register(self, backend: Type[KeyValueStore]) -> Type[KeyValueStore]:
        """Register a backend class under its ``backend_name``."""

        identifier = backend.backend_name.lower()
        LOGGER.debug("Registering storage backend '%s'", identifier)
        self._backends[identifier] = backend
        return backend

    def available_backends(self) -> Iterable[str]:
        """Return the registered identifiers in display order."""

        return sorted(self._backends.keys())

    def create(self, identifier: str, **options: object) -> KeyValueStore:
        """Instantiate the backend matching ``identifier``."""

        backend_cls = self._backends.get(identifier.lower())
        if not backend_cls:
            raise KeyError(f"Unknown storage backend '{identifier}'")
        LOGGER.debug("Creating storage backend '%s'", identifier)
        return backend_cls(**options)


REGISTRY = StorageBackendRegistry()
