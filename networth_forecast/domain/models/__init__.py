"""Domain models package."""

from .finance import (
    CategoryTotal,
    CategoryTotals,
    Family,
    ForecastConfig,
    IncomeExpenseStat,
    IncomeStatementTotals,
    NetWorthSummary,
)
from .future_event import FutureEvent
from .money import CurrencyMismatchError, Money
from .rows import (
    AccountBalanceRow,
    ExchangeRateRow,
    NetWorthSnapshotRow,
    TransactionEntryRow,
)
from .series import Period, Series, SeriesValue
from .trend import Trend

__all__ = [
    "AccountBalanceRow",
    "CategoryTotal",
    "CategoryTotals",
    "CurrencyMismatchError",
    "ExchangeRateRow",
    "Family",
    "ForecastConfig",
    "FutureEvent",
    "IncomeExpenseStat",
    "IncomeStatementTotals",
    "Money",
    "NetWorthSnapshotRow",
    "NetWorthSummary",
    "Period",
    "Series",
    "SeriesValue",
    "TransactionEntryRow",
    "Trend",
]
