"""Mini README: Process-local store backend.

Structure:
    * InMemoryStore - dict-backed ``LedgerStore`` used by tests and demos.

Failures can be switched on with ``fail_reads``/``fail_writes`` (raise
``StorageError``) or ``reject_writes`` (``set`` returns ``False``) so callers
can exercise their error paths without a real backend.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..base import LedgerStore, StorageError
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class InMemoryStore(LedgerStore):
    """Keep blobs in a dictionary for the lifetime of the process."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        super().__init__()
        self._blobs: Dict[str, str] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.reject_writes = False

    async def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageError(f"Read of '{key}' failed")
        return self._blobs.get(key)

    async def set(self, key: str, blob: str) -> bool:
        if self.fail_writes:
            raise StorageError(f"Write of '{key}' failed")
        if self.reject_writes:
            LOGGER.warning("Rejecting write of '%s'", key)
            return False
        self._blobs[key] = blob
        return True

    def metadata(self) -> Dict[str, str]:
        return {"backend": self.backend_name, "keys": str(len(self._blobs))}


REGISTRY.register(InMemoryStore)
