"""Mini README: Persistence session binding one ledger to one store.

Structure:
    * LedgerPersistenceError - load/save failure reported to the host.
    * LedgerSession - owns a ledger plus the injected store and key, and
      performs explicit ``load``/``save`` round-trips.

The store is passed in by the host, so the ledger never reaches for a global
backend. A per-session ``asyncio.Lock`` keeps at most one persistence call in
flight. Failed loads leave the current ledger in place; failed saves are
raised and never retried automatically.
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

from ..configuration import DEFAULT_STORAGE_KEY
from ..logging_utils import get_logger
from ..storage import LedgerStore, StorageError
from .ledger import EarningsLedger

LOGGER = get_logger(__name__)


class LedgerPersistenceError(Exception):
    """Raised when the ledger cannot be loaded from or saved to its store."""


class LedgerSession:
    """Hold the authoritative ledger for a host and persist it on request."""

    def __init__(
        self,
        store: LedgerStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        ledger: Optional[EarningsLedger] = None,
        strict_parsing: bool = False,
    ) -> None:
        self.store = store
        self.key = key
        self.strict_parsing = strict_parsing
        self.ledger = ledger if ledger is not None else EarningsLedger(strict_parsing=strict_parsing)
        self._lock = asyncio.Lock()

    async def load(self) -> bool:
        """Replace the ledger with the stored one.

        Returns ``False`` when nothing has been saved under the key yet, in
        which case the current ledger is kept.
        """

        async with self._lock:
            try:
                blob = await self.store.get(self.key)
            except StorageError as error:
                LOGGER.error("Loading ledger '%s' failed: %s", self.key, error)
                raise LedgerPersistenceError(f"Could not load ledger '{self.key}'") from error

            if blob is None:
                LOGGER.info("No stored ledger under '%s'; keeping current state", self.key)
                return False

            try:
                record = json.loads(blob)
            except (TypeError, ValueError, RecursionError) as error:
                LOGGER.error("Stored ledger '%s' is not valid JSON: %s", self.key, error)
                raise LedgerPersistenceError(f"Stored ledger '{self.key}' is unreadable") from error

            self.ledger = EarningsLedger.deserialize(record, strict_parsing=self.strict_parsing)
            LOGGER.info(
                "Loaded ledger '%s' (earnings %.2f, goal %.2f)",
                self.key,
                self.ledger.monthly_earnings,
                self.ledger.monthly_goal,
            )
            return True

    async def save(self) -> None:
        """Write the current ledger to the store, raising on any failure."""

        blob = json.dumps(self.ledger.serialize())
        async with self._lock:
            try:
                accepted = await self.store.set(self.key, blob)
            except StorageError as error:
                LOGGER.error("Saving ledger '%s' failed: %s", self.key, error)
                raise LedgerPersistenceError(f"Could not save ledger '{self.key}'") from error
        if not accepted:
            LOGGER.error("Store rejected ledger '%s'", self.key)
            raise LedgerPersistenceError(f"Store rejected ledger '{self.key}'")
        LOGGER.info("Saved ledger '%s'", self.key)
