"""Income/expense classification shared by every aggregation path.

Statistics, category (budget) totals and free-text search totals all go
through :func:`classify_entry`, so they always agree on what an entry
contributes.
"""

from dataclasses import dataclass
from decimal import Decimal

from networth_forecast.domain.constants import (
    ACTIVE_ACCOUNT_STATUSES,
    EXCLUDED_TRANSACTION_KINDS,
    EXPENSE,
    INCOME,
)
from networth_forecast.domain.models import TransactionEntryRow
from networth_forecast.domain.services.fx import RateMap, resolve_rate
from networth_forecast.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class ClassifiedAmount:
    """Classification and signed contribution of one entry.

    Income contributions are negative (money flowing in is stored as a
    negative amount); expense contributions are positive, except for
    reimbursements, which are negative and reduce the expense total.
    """

    classification: str
    amount: Decimal


def is_eligible_entry(entry: TransactionEntryRow) -> bool:
    """Return True when an entry counts toward income or expense totals."""
    if entry.excluded:
        return False
    if entry.kind in EXCLUDED_TRANSACTION_KINDS:
        return False
    return entry.account_status in ACTIVE_ACCOUNT_STATUSES


def classify_entry(
    entry: TransactionEntryRow,
    rate: Decimal,
) -> ClassifiedAmount:
    """Classify an entry and convert its contribution.

    Args:
        entry: Transaction entry to classify.
        rate: Exchange rate into the target currency.

    Returns:
        ClassifiedAmount: Reimbursement categories are always expenses with
        a sign-flipped contribution; otherwise negative amounts are income
        and the rest are expenses.
    """
    converted = coerce_decimal(entry.amount) * rate
    if entry.allows_negative_expenses:
        return ClassifiedAmount(classification=EXPENSE, amount=-converted)
    if entry.amount < 0:
        return ClassifiedAmount(classification=INCOME, amount=converted)
    return ClassifiedAmount(classification=EXPENSE, amount=converted)


def classify_entry_with_rates(
    entry: TransactionEntryRow,
    rate_map: RateMap,
) -> ClassifiedAmount:
    """Classify an entry using the rate for its own date and currency."""
    return classify_entry(
        entry,
        resolve_rate(rate_map, entry.date, entry.currency),
    )


__all__ = [
    "ClassifiedAmount",
    "is_eligible_entry",
    "classify_entry",
    "classify_entry_with_rates",
]
