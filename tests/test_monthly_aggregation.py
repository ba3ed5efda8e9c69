"""Tests for monthly revenue, expense and income series."""
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from salesboard.core.exceptions import InvalidArgumentError
from salesboard.models.schemas import MonthlySeries, MonthTotal
from salesboard.services.dashboard import (
    aggregate_monthly_expenses,
    aggregate_monthly_income,
    aggregate_monthly_revenue,
    build_monthly_series,
    calculate_monthly_income,
)


def test_revenue_january_only(january_store):
    series = aggregate_monthly_revenue(january_store, 2024)

    assert len(series.months) == 12
    assert [m.month for m in series.months] == list(range(1, 13))
    assert series.months[0].total == 1800
    assert series.months[0].month_name == "January"
    assert all(m.total == 0 for m in series.months[1:])
    assert series.year_total == 1800
    assert series.anomaly_count == 0


def test_empty_year_is_fully_shaped(store):
    series = aggregate_monthly_revenue(store, 2024)
    assert len(series.months) == 12
    assert series.year_total == 0


def test_sale_on_last_day_lands_in_its_own_month(store):
    store.add_department(1, "A")
    store.add_sale(1, Decimal("10"), date(2024, 1, 31))
    store.add_sale(1, Decimal("20"), date(2024, 3, 31))
    store.add_sale(1, Decimal("5"), date(2024, 12, 31))

    by_month = aggregate_monthly_revenue(store, 2024).by_month()
    assert by_month[1].total == 10
    assert by_month[2].total == 0
    assert by_month[3].total == 20
    assert by_month[12].total == 5


def test_year_total_equals_sum_of_months(store):
    store.add_department(1, "A")
    for month, amount in [(1, "0.10"), (2, "0.20"), (3, "0.30"), (7, "1234.56"), (11, "0.01")]:
        store.add_sale(1, Decimal(amount), date(2024, month, 15))

    series = aggregate_monthly_revenue(store, 2024)
    assert sum(m.total for m in series.months) == series.year_total


def test_unparseable_amounts_count_as_zero_and_are_reported(store):
    store.add_department(1, "A")
    store.add_sale(1, Decimal("100"), date(2024, 2, 1))
    store.add_sale(1, "not-a-number", date(2024, 2, 2))
    store.add_sale(1, None, date(2024, 2, 3))

    series = aggregate_monthly_revenue(store, 2024)
    assert series.by_month()[2].total == 100
    assert series.anomaly_count == 2


def test_revenue_filtered_by_department(january_store):
    series = aggregate_monthly_revenue(january_store, 2024, department_id=2)
    assert series.year_total == 300


def test_aggregation_is_idempotent(january_store):
    first = aggregate_monthly_revenue(january_store, 2024)
    second = aggregate_monthly_revenue(january_store, 2024)
    assert first.model_dump() == second.model_dump()


def test_build_series_ignores_rows_from_other_years():
    series = build_monthly_series(2024, [(date(2023, 12, 31), "50"), (date(2024, 1, 1), "25")])
    assert series.year_total == 25


def test_expenses_filtered_by_category(store):
    store.add_expense(Decimal("200"), date(2024, 1, 3), "Rent")
    store.add_expense(Decimal("50"), date(2024, 1, 9), "Supplies")

    assert aggregate_monthly_expenses(store, 2024).year_total == 250
    assert aggregate_monthly_expenses(store, 2024, category="Rent").year_total == 200


def test_income_is_revenue_minus_expenses_with_noi_beside_it(january_store):
    january_store.add_expense(Decimal("500"), date(2024, 1, 15))
    january_store.add_expense(Decimal("100"), date(2024, 2, 15))
    january_store.noi[2024] = {1: Decimal("200")}

    income = aggregate_monthly_income(january_store, 2024)
    jan = income.by_month()[1]
    feb = income.by_month()[2]

    assert (jan.revenue, jan.expenses, jan.income) == (1800, 500, 1300)
    assert jan.noi == 200
    assert jan.adjusted_income == 1500
    assert feb.income == -100
    assert income.year_total == 1200
    assert income.noi_total == 200
    assert income.adjusted_year_total == 1400


def test_income_rejects_mismatched_years():
    revenue = build_monthly_series(2024, [])
    expenses = build_monthly_series(2023, [])
    with pytest.raises(InvalidArgumentError):
        calculate_monthly_income(revenue, expenses)


def test_monthly_series_requires_all_twelve_months():
    months = [MonthTotal(month=m, month_name=str(m), total=0) for m in range(1, 12)]
    with pytest.raises(ValidationError):
        MonthlySeries(year=2024, months=months, year_total=0)
