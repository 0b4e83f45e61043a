"""Mini README: Tests covering the earnings ledger value object.

Structure:
    * aggregation - monthly earnings track the latest value per platform.
    * coercion - malformed amounts degrade to zero instead of raising.
    * goal updates - only strictly positive goals are applied.
    * records - serialise/deserialise round-trips and corrupt-record handling.
"""

from __future__ import annotations

import pytest

from gigledger.finance import AmountParseError, EarningsLedger, ExpenseCategory, Platform


def test_monthly_earnings_tracks_latest_value_per_platform() -> None:
    """Overwriting a platform replaces its contribution rather than adding to it."""

    ledger = EarningsLedger()
    updates = [("Zomato", "100"), ("Uber", 40), ("Zomato", "250.5"), ("Ola", 10.25), ("Uber", "0")]
    for platform, amount in updates:
        ledger.set_platform_earning(platform, amount)
        assert ledger.monthly_earnings == pytest.approx(sum(ledger.platform_earnings.values()))

    assert ledger.platform_earning(Platform.ZOMATO) == pytest.approx(250.5)
    assert ledger.platform_earning("uber") == 0.0
    assert ledger.monthly_earnings == pytest.approx(260.75)


def test_invalid_amount_reads_back_as_zero() -> None:
    ledger = EarningsLedger()
    ledger.set_platform_earning("Zomato", "abc")
    ledger.set_expense("Petrol", None)
    ledger.set_expense("Other", "-12")

    assert ledger.platform_earning("Zomato") == 0.0
    assert Platform.ZOMATO in ledger.platform_earnings
    assert ledger.expense("Petrol") == 0.0
    assert ledger.expense(ExpenseCategory.OTHER) == 0.0
    assert ledger.monthly_earnings == 0.0


def test_strict_ledger_raises_on_invalid_amount() -> None:
    ledger = EarningsLedger(strict_parsing=True)

    with pytest.raises(AmountParseError):
        ledger.set_platform_earning("Zomato", "abc")
    assert ledger.platform_earnings == {}


def test_unknown_platform_is_rejected() -> None:
    ledger = EarningsLedger()

    with pytest.raises(ValueError):
        ledger.set_platform_earning("Rapido", 100)
    with pytest.raises(ValueError):
        ledger.set_expense("Groceries", 100)


def test_monthly_goal_requires_positive_value() -> None:
    ledger = EarningsLedger()

    assert ledger.set_monthly_goal("-5") is False
    assert ledger.monthly_goal == 20000
    assert ledger.set_monthly_goal("nonsense") is False
    assert ledger.set_monthly_goal(0) is False
    assert ledger.monthly_goal == 20000
    assert ledger.set_monthly_goal("1000") is True
    assert ledger.monthly_goal == 1000


def test_strict_goal_update_rejects_negative_and_raises_on_text() -> None:
    ledger = EarningsLedger(strict_parsing=True)

    assert ledger.set_monthly_goal("-5") is False
    with pytest.raises(AmountParseError):
        ledger.set_monthly_goal("lots")
    assert ledger.monthly_goal == 20000


def test_daily_summary_scenario() -> None:
    """Earnings minus expenses matches the figures shown on the summary card."""

    ledger = EarningsLedger()
    ledger.set_platform_earning("Zomato", 850)
    ledger.set_platform_earning("Swiggy", "720.5")
    ledger.set_expense("Petrol", "180.5")

    assert ledger.total_expenses() == pytest.approx(180.5)
    assert ledger.net_earnings() == pytest.approx(1390.0)
    assert ledger.monthly_earnings == pytest.approx(1570.5)


def test_net_earnings_can_be_negative() -> None:
    ledger = EarningsLedger()
    ledger.set_platform_earning("Ola", 100)
    ledger.set_expense("Bike Repair", 450)

    assert ledger.net_earnings() == pytest.approx(-350.0)


def test_progress_percentage_against_goal() -> None:
    ledger = EarningsLedger()
    ledger.set_platform_earning("Uber", 5000)

    assert ledger.progress_percentage() == pytest.approx(25.0)
    assert ledger.remaining_to_goal() == pytest.approx(15000.0)

    ledger.set_platform_earning("Ola", 20000)
    assert ledger.progress_percentage() == pytest.approx(125.0)
    assert ledger.remaining_to_goal() == 0.0


def test_empty_ledger_totals() -> None:
    ledger = EarningsLedger()

    assert ledger.total_expenses() == 0.0
    assert ledger.net_earnings() == 0.0
    assert ledger.progress_percentage() == 0.0


def test_platform_distribution_is_zero_filled_in_order() -> None:
    ledger = EarningsLedger()
    ledger.set_platform_earning("Swiggy", 300)

    assert ledger.platform_distribution() == [
        {"platform": "Zomato", "amount": 0.0},
        {"platform": "Swiggy", "amount": 300.0},
        {"platform": "Uber", "amount": 0.0},
        {"platform": "Ola", "amount": 0.0},
    ]


def test_serialize_round_trip_reproduces_ledger() -> None:
    ledger = EarningsLedger()
    ledger.set_platform_earning("Zomato", 850)
    ledger.set_platform_earning("Swiggy", 720.5)
    ledger.set_expense("Petrol", 180.5)
    ledger.set_expense("Bike Repair", "99.99")
    ledger.set_monthly_goal("32000")

    record = ledger.serialize()
    assert record == {
        "monthlyGoal": 32000.0,
        "monthlyEarnings": 1570.5,
        "platformEarnings": {"Zomato": 850.0, "Swiggy": 720.5},
        "expenses": {"Petrol": 180.5, "Bike Repair": 99.99},
    }
    assert EarningsLedger.deserialize(record) == ledger


def test_deserialize_empty_record_uses_defaults() -> None:
    ledger = EarningsLedger.deserialize({})

    assert ledger.monthly_goal == 20000
    assert ledger.monthly_earnings == 0
    assert ledger.platform_earnings == {}
    assert ledger.expenses == {}


def test_deserialize_corrupt_record_degrades_without_raising() -> None:
    ledger = EarningsLedger.deserialize(
        {
            "monthlyGoal": "not-a-number",
            "monthlyEarnings": 99999,
            "platformEarnings": {"Zomato": "lots", "Swiggy": 120, "Rapido": 50},
            "expenses": ["Petrol", 10],
        }
    )

    assert ledger.monthly_goal == 20000
    assert ledger.platform_earnings == {Platform.ZOMATO: 0.0, Platform.SWIGGY: 120.0}
    assert ledger.monthly_earnings == pytest.approx(120.0)
    assert ledger.expenses == {}


def test_deserialize_non_mapping_record_uses_defaults() -> None:
    assert EarningsLedger.deserialize(["junk"]) == EarningsLedger()


def test_oversized_integer_amounts_degrade_to_zero() -> None:
    ledger = EarningsLedger()
    ledger.set_platform_earning("Zomato", 10**400)
    ledger.set_expense("Petrol", 10**400)

    assert ledger.platform_earning("Zomato") == 0.0
    assert ledger.expense("Petrol") == 0.0
    assert ledger.set_monthly_goal(10**400) is False
    assert ledger.monthly_goal == 20000

    restored = EarningsLedger.deserialize(
        {"monthlyGoal": 10**400, "platformEarnings": {"Zomato": 10**400, "Ola": 50}}
    )
    assert restored.monthly_goal == 20000
    assert restored.platform_earning("Zomato") == 0.0
    assert restored.monthly_earnings == pytest.approx(50.0)
