"""Mini README: Tests for amount parsing and rupee formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest

from gigledger.finance import AmountParseError, format_rupees, parse_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("850", 850.0),
        (" 720.5 ", 720.5),
        (42, 42.0),
        (Decimal("10.25"), 10.25),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        ("-3", 0.0),
        (10**400, 0.0),
    ],
)
def test_lenient_parsing(raw, expected) -> None:
    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "", None, "-3", float("inf"), [1], 10**400])
def test_strict_parsing_raises(raw) -> None:
    with pytest.raises(AmountParseError):
        parse_amount(raw, strict=True)


def test_signed_parsing_keeps_negative_values() -> None:
    assert parse_amount("-5", signed=True) == -5.0
    assert parse_amount("-5", strict=True, signed=True) == -5.0


def test_format_rupees() -> None:
    assert format_rupees(1570.5) == "₹1,570.50"
    assert format_rupees(0) == "₹0.00"
    assert format_rupees(-350) == "-₹350.00"
