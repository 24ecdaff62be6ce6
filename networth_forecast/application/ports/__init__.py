"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_repository import FinanceRepositoryPort
from .forecast_inputs import BalanceSheetPort, IncomeStatisticsPort
from .future_events_repository import FutureEventsRepositoryPort
from .net_worth_series import NetWorthSeriesPort

__all__ = [
    "BalanceSheetPort",
    "DatabaseEnginePort",
    "FinanceRepositoryPort",
    "FutureEventsRepositoryPort",
    "IncomeStatisticsPort",
    "NetWorthSeriesPort",
]
