"""Mini README: FastAPI JSON host for the earnings ledger.

Structure:
    * create_application - application factory wiring one LedgerSession to
      the routes below.
    * AmountPayload - request body carrying a raw, user-typed amount.

Screens and widgets talk to the ledger through these endpoints; nothing here
renders UI. The store is chosen from settings unless the caller injects one,
which is how tests run the app against an in-memory backend.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ..configuration import GigLedgerSettings, get_settings
from ..finance import (
    AmountParseError,
    EarningsLedger,
    ExpenseCategory,
    LedgerPersistenceError,
    LedgerSession,
    Platform,
)
from ..logging_utils import get_logger
from ..storage import REGISTRY, LedgerStore

LOGGER = get_logger(__name__)


class AmountPayload(BaseModel):
    """Raw amount as typed by the user; parsed by the ledger, not here."""

    amount: Any = None


def build_store(settings: GigLedgerSettings) -> LedgerStore:
    """Create the configured store backend."""

    if settings.storage_backend == "json-file":
        return REGISTRY.create("json-file", directory=settings.data_directory)
    return REGISTRY.create(settings.storage_backend)


def create_application(
    store: Optional[LedgerStore] = None,
    settings: Optional[GigLedgerSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes bound to one ledger session."""

    settings = settings or get_settings()
    app = FastAPI(title="Gig Earnings Ledger", version="0.1.0")
    session = LedgerSession(
        store or build_store(settings),
        key=settings.storage_key,
        ledger=EarningsLedger(
            monthly_goal=settings.default_monthly_goal,
            strict_parsing=settings.strict_parsing,
        ),
        strict_parsing=settings.strict_parsing,
    )
    app.state.session = session

    def _snapshot() -> Dict[str, Any]:
        return session.ledger.export_snapshot()

    @app.get("/ledger")
    async def read_ledger() -> Dict[str, Any]:
        """Return the ledger record with derived totals."""

        return _snapshot()

    @app.put("/ledger/platforms/{platform}")
    async def update_platform(platform: str, payload: AmountPayload) -> Dict[str, Any]:
        try:
            key = Platform.from_str(platform)
        except ValueError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        try:
            session.ledger.set_platform_earning(key, payload.amount)
        except AmountParseError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        return _snapshot()

    @app.put("/ledger/expenses/{category}")
    async def update_expense(category: str, payload: AmountPayload) -> Dict[str, Any]:
        try:
            key = ExpenseCategory.from_str(category)
        except ValueError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        try:
            session.ledger.set_expense(key, payload.amount)
        except AmountParseError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        return _snapshot()

    @app.put("/ledger/goal")
    async def update_goal(payload: AmountPayload) -> Dict[str, Any]:
        """Apply a new goal; ``applied`` is false when the value was rejected."""

        try:
            applied = session.ledger.set_monthly_goal(payload.amount)
        except AmountParseError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        return {"applied": applied, "ledger": _snapshot()}

    @app.post("/ledger/save")
    async def save_ledger() -> Dict[str, Any]:
        try:
            await session.save()
        except LedgerPersistenceError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        return {"saved": True, "store": session.store.metadata()}

    @app.post("/ledger/load")
    async def load_ledger() -> Dict[str, Any]:
        """Reload from the store; ``loaded`` is false when nothing was saved yet."""

        try:
            loaded = await session.load()
        except LedgerPersistenceError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        LOGGER.debug("Load request finished loaded=%s", loaded)
        return {"loaded": loaded, "ledger": _snapshot()}

    return app
