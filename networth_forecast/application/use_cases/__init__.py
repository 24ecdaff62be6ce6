"""Application use cases package."""

from .balance_sheet import BalanceSheet
from .forecast import Forecast
from .get_forecast import ForecastView, GetForecastUseCase
from .income_statement import IncomeStatement
from .manage_future_events import (
    FutureEventNotFoundError,
    FutureEventResult,
    ManageFutureEventsUseCase,
)

__all__ = [
    "BalanceSheet",
    "IncomeStatement",
    "Forecast",
    "GetForecastUseCase",
    "ForecastView",
    "ManageFutureEventsUseCase",
    "FutureEventResult",
    "FutureEventNotFoundError",
]
