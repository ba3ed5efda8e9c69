"""Tests for the per-department daily performance report."""
from datetime import date
from decimal import Decimal

import pytest

from salesboard.core.exceptions import DepartmentNotFoundError
from salesboard.services.dashboard import aggregate_service_daily


@pytest.fixture
def daily_store(store):
    store.add_department(1, "A")
    store.add_sale(1, Decimal("1000"), date(2024, 1, 5))
    store.add_sale(1, Decimal("800"), date(2024, 1, 20))
    store.add_sale(1, Decimal("1000"), date(2024, 2, 1))
    store.add_sale(1, Decimal("1900"), date(2024, 2, 29))
    return store


def test_rolling_target_from_previous_month(daily_store):
    report = aggregate_service_daily(daily_store, 1, 2024, 2, target_year=2024, target_month=1)

    assert report.target_source == "none"
    assert round(report.daily_target, 2) == 58.06
    assert report.stats.target == 1800
    assert report.stats.total_sales == 2900
    assert report.stats.percent_of_target == 161.1
    assert report.stats.difference == 1100


def test_breakdown_has_one_entry_per_day(daily_store):
    report = aggregate_service_daily(daily_store, 1, 2024, 2, target_year=2024, target_month=1)

    assert [e.day for e in report.daily_breakdown] == list(range(1, 30))
    last = report.daily_breakdown[-1]
    assert last.sales == 1900
    assert last.variance == pytest.approx(1900 - 1800 / 31)
    assert last.cumulative_sales == 2900
    assert last.cumulative_target == pytest.approx(1800 / 31 * 29)
    assert report.daily_breakdown[1].sales == 0


def test_non_leap_february_has_28_days(store):
    store.add_department(1, "A")
    report = aggregate_service_daily(store, 1, 2023, 2)
    assert len(report.daily_breakdown) == 28


def test_explicit_monthly_target_wins(daily_store):
    daily_store.targets[(1, 2024, 2)] = Decimal("2000")
    report = aggregate_service_daily(daily_store, 1, 2024, 2)

    assert report.target_source == "monthly"
    assert report.target_month == 2
    assert report.daily_target == pytest.approx(2000 / 29)
    assert report.stats.percent_of_target == 145.0


def test_department_default_target(store):
    store.add_department(1, "A", default_target=Decimal("3100"))
    report = aggregate_service_daily(store, 1, 2024, 1)

    assert report.target_source == "department"
    assert report.daily_target == 100.0
    assert report.stats.target == 3100


def test_zero_target_guards_percentage(store):
    store.add_department(1, "A")
    store.targets[(1, 2024, 3)] = Decimal("0")
    store.add_sale(1, Decimal("10"), date(2024, 3, 2))

    report = aggregate_service_daily(store, 1, 2024, 3)
    assert report.daily_target == 0
    assert report.stats.percent_of_target == 0.0


def test_department_name_without_sales(store):
    store.add_department(7, "Pharmacy")
    report = aggregate_service_daily(store, 7, 2024, 4)
    assert report.department_name == "Pharmacy"
    assert report.stats.total_sales == 0


def test_unknown_department_raises(store):
    store.add_department(1, "A")
    with pytest.raises(DepartmentNotFoundError):
        aggregate_service_daily(store, 42, 2024, 1)
