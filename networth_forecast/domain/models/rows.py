"""Domain models for repository row data."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AccountBalanceRow:
    """Current balance of an account."""

    account_id: str
    name: str
    classification: str
    status: str
    currency: str
    balance: Decimal


@dataclass(frozen=True)
class NetWorthSnapshotRow:
    """Asset and liability totals at a bucket date, in the family currency."""

    date: date
    asset_total: Decimal
    liability_total: Decimal


@dataclass(frozen=True)
class TransactionEntryRow:
    """Transaction entry with the category flags needed to classify it."""

    entry_id: str
    date: date
    name: str
    amount: Decimal
    currency: str
    kind: str
    excluded: bool = False
    account_status: str = "active"
    category_id: str | None = None
    category_name: str | None = None
    allows_negative_expenses: bool = False


@dataclass(frozen=True)
class ExchangeRateRow:
    """Daily exchange rate between two currencies."""

    date: date
    from_currency: str
    to_currency: str
    rate: Decimal


__all__ = [
    "AccountBalanceRow",
    "NetWorthSnapshotRow",
    "TransactionEntryRow",
    "ExchangeRateRow",
]
