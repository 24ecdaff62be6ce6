"""Tests for income statement domain services."""

from datetime import date
from decimal import Decimal

from networth_forecast.domain.models import Money, TransactionEntryRow
from networth_forecast.domain.services import (
    compute_category_totals,
    compute_family_stats,
    compute_search_totals,
    compute_totals,
)
from networth_forecast.domain.services.income_statement import matches_query


def _entry(
    entry_id: str,
    day: date,
    amount: str,
    **overrides,
) -> TransactionEntryRow:
    values = dict(
        entry_id=entry_id,
        date=day,
        name=f"Entry {entry_id}",
        amount=Decimal(amount),
        currency="EUR",
        kind="standard",
    )
    values.update(overrides)
    return TransactionEntryRow(**values)


def _groceries_with_reimbursement() -> list[TransactionEntryRow]:
    return [
        _entry(
            "groceries",
            date(2024, 1, 5),
            "150",
            category_id="c1",
            category_name="Groceries",
        ),
        _entry(
            "refund",
            date(2024, 1, 8),
            "25",
            category_id="c2",
            category_name="Reimbursements",
            allows_negative_expenses=True,
        ),
    ]


def test_family_stats_median_and_average_per_month() -> None:
    entries = [
        _entry("s1", date(2024, 1, 3), "-3000"),
        _entry("s2", date(2024, 2, 3), "-3000"),
        _entry("s3", date(2024, 3, 3), "-4000"),
        _entry("r1", date(2024, 1, 5), "1000"),
        _entry("r2", date(2024, 2, 5), "1200"),
        _entry("r3", date(2024, 3, 5), "1400"),
        _entry("old", date(2021, 3, 5), "99999"),
        _entry("xfer", date(2024, 3, 6), "500", kind="funds_movement"),
    ]

    stats = compute_family_stats(
        entries,
        {},
        interval="month",
        window_start=date(2022, 1, 1),
    )

    assert stats["income"].median == Decimal("3000")
    assert stats["income"].average == Decimal("10000") / 3
    assert stats["expense"].median == Decimal("1200")
    assert stats["expense"].average == Decimal("1200")


def test_family_stats_omits_missing_classification() -> None:
    stats = compute_family_stats(
        [_entry("r1", date(2024, 1, 5), "100")],
        {},
        interval="month",
        window_start=date(2024, 1, 1),
    )

    assert "income" not in stats
    assert stats["expense"].median == Decimal("100")


def test_reimbursements_agree_across_stats_budget_and_search() -> None:
    entries = _groceries_with_reimbursement()

    stats = compute_family_stats(
        entries,
        {},
        interval="month",
        window_start=date(2024, 1, 1),
    )
    budget = compute_category_totals(entries, {}, "expense", "EUR")
    search = compute_search_totals(entries, {}, "", "EUR")

    assert stats["expense"].median == Decimal("125")
    assert budget.total == Money(Decimal("125"), "EUR")
    assert search.expense == Money(Decimal("125"), "EUR")
    by_name = {item.category_name: item for item in budget.category_totals}
    assert by_name["Reimbursements"].total == Money(Decimal("-25"), "EUR")
    assert by_name["Groceries"].total == Money(Decimal("150"), "EUR")


def test_totals_count_only_eligible_entries() -> None:
    entries = [
        _entry("salary", date(2024, 1, 1), "-2000"),
        _entry("rent", date(2024, 1, 2), "800"),
        _entry("hidden", date(2024, 1, 3), "50", excluded=True),
    ]

    totals = compute_totals(entries, {}, "EUR")

    assert totals.transactions_count == 2
    assert totals.income == Money(Decimal("2000"), "EUR")
    assert totals.expense == Money(Decimal("800"), "EUR")
    assert totals.net == Money(Decimal("1200"), "EUR")


def test_income_category_totals_are_magnitudes_sorted_by_name() -> None:
    entries = [
        _entry(
            "b",
            date(2024, 1, 1),
            "-100",
            category_id="b",
            category_name="bonus",
        ),
        _entry("u", date(2024, 1, 2), "-50"),
        _entry(
            "s",
            date(2024, 1, 3),
            "-2000",
            category_id="s",
            category_name="Salary",
        ),
    ]

    totals = compute_category_totals(entries, {}, "income", "EUR")

    assert [item.category_name for item in totals.category_totals] == [
        "bonus",
        "Salary",
        "Uncategorized",
    ]
    assert totals.total == Money(Decimal("2150"), "EUR")


def test_search_matches_entry_and_category_names() -> None:
    entries = _groceries_with_reimbursement()

    totals = compute_search_totals(entries, {}, "grocer", "EUR")

    assert matches_query(entries[1], "REIMB")
    assert not matches_query(entries[0], "salary")
    assert totals.transactions_count == 1
    assert totals.expense == Money(Decimal("150"), "EUR")
