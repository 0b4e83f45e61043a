"""Mini README: Abstract storage boundary for persisted ledger blobs.

Structure:
    * StorageError - raised by adapters when the backend rejects a call.
    * LedgerStore - asynchronous key-value interface implemented by backends.

A store only moves opaque strings: ``get`` returns the blob saved under a
key (or ``None``) and ``set`` reports whether the write was accepted. The
JSON shape inside the blob belongs to ``EarningsLedger.serialize``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageError(Exception):
    """Raised when a backend cannot complete a read or write."""


class LedgerStore(ABC):
    """Base interface for key-value backends holding ledger blobs."""

    backend_name: str = "generic"

    def __init__(self) -> None:
        LOGGER.debug("Initialising %s store", self.backend_name)

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key`` or ``None`` when absent."""

    @abstractmethod
    async def set(self, key: str, blob: str) -> bool:
        """Persist ``blob`` under ``key`` and report success."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for status responses."""

        return {"backend": self.backend_name}
