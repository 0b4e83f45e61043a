"""Mini README: Amount parsing and formatting for the earnings ledger.

Structure:
    * AmountParseError - raised by strict parsing for malformed amounts.
    * parse_amount - lenient/strict conversion of user input to a float.
    * format_rupees - render amounts the way summaries display them.

Amounts arrive as free text typed into numeric fields. Lenient parsing keeps
the mobile app's behaviour of treating anything unusable as zero; strict
parsing surfaces the same cases as errors for hosts that want feedback.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

RawAmount = Union[str, int, float, Decimal, None]


class AmountParseError(ValueError):
    """Raised when strict parsing meets an unusable amount."""


def _to_float(raw: object, signed: bool) -> float:
    if raw is None or isinstance(raw, bool):
        raise AmountParseError(f"Amount must be numeric, got {raw!r}")
    if isinstance(raw, (int, float, Decimal)):
        try:
            value = float(raw)
        except OverflowError as error:
            raise AmountParseError("Amount is too large") from error
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise AmountParseError("Amount is empty")
        try:
            value = float(text)
        except ValueError as error:
            raise AmountParseError(f"Amount {raw!r} is not a number") from error
    else:
        raise AmountParseError(f"Unsupported amount type: {type(raw).__name__}")

    if not math.isfinite(value):
        raise AmountParseError(f"Amount {raw!r} is not finite")
    if value < 0 and not signed:
        raise AmountParseError(f"Amount {raw!r} is negative")
    return value


def parse_amount(raw: object, *, strict: bool = False, signed: bool = False) -> float:
    """Convert ``raw`` to a float, non-negative unless ``signed`` is set.

    Lenient mode returns ``0.0`` for anything invalid; strict mode raises
    ``AmountParseError`` instead.
    """

    try:
        return _to_float(raw, signed)
    except AmountParseError:
        if strict:
            raise
        LOGGER.debug("Coercing invalid amount %r to 0", raw)
        return 0.0


def format_rupees(amount: float) -> str:
    """Format an amount as ``₹1,234.50``."""

    sign = "-" if amount < 0 else ""
    return f"{sign}₹{abs(amount):,.2f}"
