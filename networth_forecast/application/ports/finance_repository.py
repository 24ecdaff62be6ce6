"""Port for finance reads needed by balance sheet and income statement."""

from datetime import date
from typing import Protocol

from networth_forecast.domain.models import (
    AccountBalanceRow,
    ExchangeRateRow,
    Family,
    NetWorthSnapshotRow,
    TransactionEntryRow,
)


class FinanceRepositoryPort(Protocol):
    """Port exposing family, account and transaction data."""

    def fetch_family(self, family_id: str) -> Family:
        """Return the family, raising RuntimeError when it does not exist."""

    def fetch_account_balances(
        self,
        family_id: str,
    ) -> list[AccountBalanceRow]:
        """Return the current balance of every account of the family."""

    def fetch_net_worth_snapshots(
        self,
        family_id: str,
        start_date: date,
        end_date: date,
        interval: str,
        target_currency: str,
    ) -> list[NetWorthSnapshotRow]:
        """Return asset and liability totals per interval bucket."""

    def fetch_transaction_entries(
        self,
        family_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[TransactionEntryRow]:
        """Return transaction entries posted within the dates."""

    def fetch_exchange_rates(
        self,
        target_currency: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[ExchangeRateRow]:
        """Return exchange rates into the target currency."""


__all__ = ["FinanceRepositoryPort"]
