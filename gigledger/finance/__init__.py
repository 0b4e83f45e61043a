"""Mini README: Earnings ledger for the gig-worker companion.

This package holds the ledger a rider fills in from the earnings screen:
per-platform income, per-category expenses and a monthly goal. ``ledger``
defines the value object and its stored record, ``amounts`` the parsing and
formatting of user-entered figures, and ``session`` the explicit load/save
round-trip against an injected store.
"""

from .amounts import AmountParseError, format_rupees, parse_amount
from .ledger import EarningsLedger, ExpenseCategory, Platform
from .session import LedgerPersistenceError, LedgerSession

__all__ = [
    "AmountParseError",
    "EarningsLedger",
    "ExpenseCategory",
    "LedgerPersistenceError",
    "LedgerSession",
    "Platform",
    "format_rupees",
    "parse_amount",
]
