"""Mini README: In-memory earnings ledger for gig-worker income and expenses.

Structure:
    * Platform - enum of the income platforms a rider records earnings for.
    * ExpenseCategory - enum of the fixed expense classifications.
    * EarningsLedger - per-platform earnings, per-category expenses and a
      monthly goal, with derived totals and a flat serialisable record.

The ledger is a plain value object: every setter finishes synchronously and
only touches the ledger's own fields. ``monthly_earnings`` is recomputed on
each earnings update so it always equals the sum of ``platform_earnings``.
Persistence lives in ``gigledger.finance.session``; this module only defines
the record shape through ``serialize``/``deserialize``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Type

from ..configuration import DEFAULT_MONTHLY_GOAL
from ..logging_utils import get_logger
from .amounts import RawAmount, parse_amount

LOGGER = get_logger(__name__)


class _NamedKey(str, Enum):
    @classmethod
    def from_str(cls, value: str):
        """Match a display name ignoring case and surrounding whitespace."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported {cls.__name__}: {value!r}") from error
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported {cls.__name__}: {value!r}")


class Platform(_NamedKey):
    """Income platforms tracked by the ledger."""

    ZOMATO = "Zomato"
    SWIGGY = "Swiggy"
    UBER = "Uber"
    OLA = "Ola"


class ExpenseCategory(_NamedKey):
    """Expense classifications tracked by the ledger."""

    PETROL = "Petrol"
    BIKE_REPAIR = "Bike Repair"
    OTHER = "Other"


@dataclass(slots=True)
class EarningsLedger:
    """A period's earnings, expenses and goal."""

    monthly_goal: float = DEFAULT_MONTHLY_GOAL
    platform_earnings: Dict[Platform, float] = field(default_factory=dict)
    expenses: Dict[ExpenseCategory, float] = field(default_factory=dict)
    strict_parsing: bool = field(default=False, compare=False)
    monthly_earnings: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.monthly_goal <= 0:
            raise ValueError("Monthly goal must be positive")
        self._recompute_monthly_earnings()

    def _recompute_monthly_earnings(self) -> None:
        self.monthly_earnings = sum(self.platform_earnings.values(), 0.0)

    def set_platform_earning(self, platform: Platform | str, raw_amount: RawAmount) -> None:
        """Record the earning for ``platform``; malformed amounts become 0."""

        key = Platform.from_str(platform)
        self.platform_earnings[key] = parse_amount(raw_amount, strict=self.strict_parsing)
        self._recompute_monthly_earnings()
        LOGGER.debug(
            "Platform %s set to %.2f (monthly total %.2f)",
            key.value,
            self.platform_earnings[key],
            self.monthly_earnings,
        )

    def set_expense(self, category: ExpenseCategory | str, raw_amount: RawAmount) -> None:
        """Record the expense for ``category``; does not touch earnings."""

        key = ExpenseCategory.from_str(category)
        self.expenses[key] = parse_amount(raw_amount, strict=self.strict_parsing)
        LOGGER.debug("Expense %s set to %.2f", key.value, self.expenses[key])

    def set_monthly_goal(self, raw_amount: RawAmount) -> bool:
        """Apply a new goal if it is strictly positive and report whether it was applied."""

        goal = parse_amount(raw_amount, strict=self.strict_parsing, signed=True)
        if goal <= 0:
            LOGGER.warning("Rejected monthly goal update %r; keeping %.2f", raw_amount, self.monthly_goal)
            return False
        self.monthly_goal = goal
        LOGGER.info("Monthly goal updated to %.2f", goal)
        return True

    def platform_earning(self, platform: Platform | str) -> float:
        return self.platform_earnings.get(Platform.from_str(platform), 0.0)

    def expense(self, category: ExpenseCategory | str) -> float:
        return self.expenses.get(ExpenseCategory.from_str(category), 0.0)

    def total_expenses(self) -> float:
        return sum(self.expenses.values(), 0.0)

    def net_earnings(self) -> float:
        """Platform earnings minus expenses; negative when expenses win."""

        return sum(self.platform_earnings.values(), 0.0) - self.total_expenses()

    def progress_percentage(self) -> float:
        """Share of the monthly goal reached, in percent; may exceed 100."""

        return self.monthly_earnings / self.monthly_goal * 100

    def remaining_to_goal(self) -> float:
        return max(self.monthly_goal - self.monthly_earnings, 0.0)

    def platform_distribution(self) -> List[Dict[str, object]]:
        """Per-platform amounts in enumeration order, zero-filled, for charts."""

        return [
            {"platform": platform.value, "amount": self.platform_earnings.get(platform, 0.0)}
            for platform in Platform
        ]

    def serialize(self) -> Dict[str, Any]:
        """Return the flat record stored as the ledger blob."""

        return {
            "monthlyGoal": self.monthly_goal,
            "monthlyEarnings": self.monthly_earnings,
            "platformEarnings": {key.value: amount for key, amount in self.platform_earnings.items()},
            "expenses": {key.value: amount for key, amount in self.expenses.items()},
        }

    def export_snapshot(self) -> Dict[str, Any]:
        """Serialised record plus derived figures for JSON responses."""

        snapshot = self.serialize()
        snapshot.update(
            {
                "totalExpenses": self.total_expenses(),
                "netEarnings": self.net_earnings(),
                "progressPercentage": self.progress_percentage(),
                "remainingToGoal": self.remaining_to_goal(),
                "distribution": self.platform_distribution(),
            }
        )
        return snapshot

    @classmethod
    def deserialize(cls, record: Mapping[str, Any], *, strict_parsing: bool = False) -> "EarningsLedger":
        """Rebuild a ledger from a stored record.

        Missing fields fall back to defaults and corrupt values degrade to
        zero-like figures instead of raising. The stored ``monthlyEarnings``
        is not trusted; it is recomputed from the restored platform entries.
        """

        if not isinstance(record, Mapping):
            LOGGER.warning("Ledger record is %s, not a mapping; using defaults", type(record).__name__)
            record = {}

        goal = parse_amount(record.get("monthlyGoal"), signed=True)
        if goal <= 0:
            if "monthlyGoal" in record:
                LOGGER.warning("Stored monthly goal %r unusable; using default", record["monthlyGoal"])
            goal = DEFAULT_MONTHLY_GOAL

        ledger = cls(
            monthly_goal=goal,
            platform_earnings=_restore_mapping(Platform, record.get("platformEarnings")),
            expenses=_restore_mapping(ExpenseCategory, record.get("expenses")),
            strict_parsing=strict_parsing,
        )
        stored_total = record.get("monthlyEarnings")
        if stored_total is not None and parse_amount(stored_total) != ledger.monthly_earnings:
            LOGGER.warning(
                "Stored monthly earnings %r disagree with platform total %.2f; using the total",
                stored_total,
                ledger.monthly_earnings,
            )
        return ledger


def _restore_mapping(key_type: Type[_NamedKey], raw: object) -> Dict[Any, float]:
    """Rebuild an amount mapping, dropping unknown keys and zeroing bad values."""

    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        LOGGER.warning("Expected a mapping of %s amounts, got %s", key_type.__name__, type(raw).__name__)
        return {}

    restored: Dict[Any, float] = {}
    for name, amount in raw.items():
        try:
            key = key_type.from_str(name)
        except ValueError:
            LOGGER.warning("Dropping unknown %s %r from stored ledger", key_type.__name__, name)
            continue
        restored[key] = parse_amount(amount)
    return restored
