from decimal import Decimal

import pytest

from salesboard.services.dashboard.amounts import coerce_amount, percent_change, percentage


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("12.50", Decimal("12.50")),
        (" 7 ", Decimal("7")),
        (5, Decimal("5")),
        (2.5, Decimal("2.5")),
        (Decimal("99.99"), Decimal("99.99")),
    ],
)
def test_coerce_amount_valid(raw, expected):
    assert coerce_amount(raw) == (expected, False)


@pytest.mark.parametrize("raw", [None, "", "abc", float("nan"), float("inf"), Decimal("NaN"), True])
def test_coerce_amount_anomalies_count_as_zero(raw):
    value, anomalous = coerce_amount(raw)
    assert value == 0
    assert anomalous is True


def test_percentage_rounds_to_one_decimal():
    assert percentage(1500, 1800) == 83.3
    assert percentage(300, 1800) == 16.7


def test_percentage_zero_whole_is_zero():
    assert percentage(5, 0) == 0.0
    assert percentage(Decimal("0"), Decimal("0")) == 0.0


def test_percent_change_from_zero():
    assert percent_change(0, 50) == 100.0
    assert percent_change(0, 0) == 0.0
    assert percent_change(0, -5) == 0.0


def test_percent_change_regular():
    assert percent_change(100, 150) == 50.0
    assert percent_change(200, 100) == -50.0
    assert percent_change(150, 280) == 86.67


def test_percent_change_negative_previous_uses_magnitude():
    # Loss shrinking from -100 to -50 is an improvement
    assert percent_change(-100, -50) == 50.0
