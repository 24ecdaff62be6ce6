"""Domain services for income statement aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from statistics import mean, median

from networth_forecast.domain.constants import CLASSIFICATIONS, INCOME
from networth_forecast.domain.models import (
    CategoryTotal,
    CategoryTotals,
    IncomeExpenseStat,
    IncomeStatementTotals,
    Money,
    TransactionEntryRow,
)
from networth_forecast.domain.services.classification import (
    classify_entry_with_rates,
    is_eligible_entry,
)
from networth_forecast.domain.services.fx import RateMap
from networth_forecast.utils.date_utils import truncate_date


UNCATEGORIZED = "Uncategorized"


def compute_family_stats(
    entries: Iterable[TransactionEntryRow],
    rate_map: RateMap,
    *,
    interval: str,
    window_start: date,
) -> dict[str, IncomeExpenseStat]:
    """Compute median and average per-period totals by classification.

    Args:
        entries: Transaction entries of the family.
        rate_map: Exchange rates into the family currency.
        interval: Period bucket (week, month, quarter or year).
        window_start: First day included in the statistics.

    Returns:
        dict[str, IncomeExpenseStat]: Statistics keyed by classification.
        Classifications without any entry in the window are omitted.
    """
    period_totals: dict[tuple[str, date], Decimal] = {}
    for entry in entries:
        if entry.date < window_start or not is_eligible_entry(entry):
            continue
        classified = classify_entry_with_rates(entry, rate_map)
        key = (classified.classification, truncate_date(entry.date, interval))
        period_totals[key] = (
            period_totals.get(key, Decimal("0")) + classified.amount
        )

    stats: dict[str, IncomeExpenseStat] = {}
    for classification in CLASSIFICATIONS:
        totals = [
            total
            for (kind, _), total in sorted(period_totals.items())
            if kind == classification
        ]
        if not totals:
            continue
        stats[classification] = IncomeExpenseStat(
            classification=classification,
            median=abs(median(totals)),
            average=abs(mean(totals)),
        )
    return stats


def compute_totals(
    entries: Iterable[TransactionEntryRow],
    rate_map: RateMap,
    currency: str,
) -> IncomeStatementTotals:
    """Sum income and net expense over eligible entries.

    Args:
        entries: Transaction entries to aggregate.
        rate_map: Exchange rates into ``currency``.
        currency: Target currency code.

    Returns:
        IncomeStatementTotals: Income as a magnitude, expense net of
        reimbursements.
    """
    count = 0
    income = Decimal("0")
    expense = Decimal("0")
    for entry in entries:
        if not is_eligible_entry(entry):
            continue
        count += 1
        classified = classify_entry_with_rates(entry, rate_map)
        if classified.classification == INCOME:
            income += classified.amount
        else:
            expense += classified.amount
    return IncomeStatementTotals(
        transactions_count=count,
        income=Money(abs(income), currency),
        expense=Money(expense, currency),
    )


def compute_category_totals(
    entries: Iterable[TransactionEntryRow],
    rate_map: RateMap,
    classification: str,
    currency: str,
) -> CategoryTotals:
    """Group one classification's contributions by category.

    Income categories report magnitudes. Expense categories report their net
    contribution, so reimbursement categories come out negative and lower
    the overall total.

    Args:
        entries: Transaction entries to aggregate.
        rate_map: Exchange rates into ``currency``.
        classification: ``income`` or ``expense``.
        currency: Target currency code.

    Returns:
        CategoryTotals: Category totals sorted by name, and their sum.
    """
    sums: dict[str | None, Decimal] = {}
    counts: dict[str | None, int] = {}
    names: dict[str | None, str] = {}
    for entry in entries:
        if not is_eligible_entry(entry):
            continue
        classified = classify_entry_with_rates(entry, rate_map)
        if classified.classification != classification:
            continue
        key = entry.category_id
        sums[key] = sums.get(key, Decimal("0")) + classified.amount
        counts[key] = counts.get(key, 0) + 1
        names.setdefault(key, entry.category_name or UNCATEGORIZED)

    category_totals = []
    for key, amount in sums.items():
        total = abs(amount) if classification == INCOME else amount
        category_totals.append(
            CategoryTotal(
                category_id=key,
                category_name=names[key],
                total=Money(total, currency),
                transactions_count=counts[key],
            )
        )
    category_totals.sort(
        key=lambda item: (item.category_name.lower(), item.category_id or ""),
    )
    overall = sum(
        (item.total for item in category_totals),
        start=Money.zero(currency),
    )
    return CategoryTotals(
        classification=classification,
        total=overall,
        category_totals=category_totals,
    )


def matches_query(entry: TransactionEntryRow, query: str | None) -> bool:
    """Case-insensitive match of a query on entry and category names."""
    if not query or not query.strip():
        return True
    needle = query.strip().lower()
    if needle in entry.name.lower():
        return True
    return bool(entry.category_name and needle in entry.category_name.lower())


def compute_search_totals(
    entries: Iterable[TransactionEntryRow],
    rate_map: RateMap,
    query: str | None,
    currency: str,
) -> IncomeStatementTotals:
    """Totals of the entries matched by a free-text search."""
    matched = [entry for entry in entries if matches_query(entry, query)]
    return compute_totals(matched, rate_map, currency)


__all__ = [
    "UNCATEGORIZED",
    "compute_family_stats",
    "compute_totals",
    "compute_category_totals",
    "matches_query",
    "compute_search_totals",
]
