"""Mini README: Registry mapping backend identifiers to store classes.

Structure:
    * StoreRegistry - registers ``LedgerStore`` subclasses and builds them.

Hosts look backends up by the identifier in ``GIGLEDGER_STORAGE_BACKEND`` so
new backends only need to subclass ``LedgerStore`` and register on import.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Type

from .base import LedgerStore
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StoreRegistry:
    """Simple registry for mapping backend identifiers to classes."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[LedgerStore]] = {}

    def register(self, backend: Type[LedgerStore]) -> None:
        """Register a new store class with the registry."""

        identifier = backend.backend_name.lower()
        LOGGER.debug("Registering store backend '%s'", identifier)
        self._backends[identifier] = backend

    def available_backends(self) -> Iterable[str]:
        return sorted(self._backends.keys())

    def create(self, identifier: str, **options: Any) -> LedgerStore:
        """Instantiate the backend matching ``identifier`` with ``options``."""

        backend_cls = self._backends.get(identifier.lower())
        if not backend_cls:
            raise KeyError(f"Unknown store backend '{identifier}'")
        LOGGER.info("Creating store backend '%s'", identifier)
        return backend_cls(**options)


REGISTRY = StoreRegistry()
