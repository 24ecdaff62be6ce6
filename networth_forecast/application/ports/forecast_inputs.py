"""Ports for the collaborators a forecast reads from."""

from decimal import Decimal
from typing import Protocol

from networth_forecast.domain.models import Money, Period, Series


class BalanceSheetPort(Protocol):
    """Read access to current and historical net worth."""

    def net_worth(self) -> Money:
        """Return the current net worth."""

    def net_worth_series(
        self,
        period: Period | None = None,
        interval: str = "month",
    ) -> Series:
        """Return historical net worth points for the period."""


class IncomeStatisticsPort(Protocol):
    """Read access to trailing income and expense statistics."""

    def median_income(self, interval: str = "month") -> Decimal | None:
        """Return the median per-period income magnitude."""

    def median_expense(self, interval: str = "month") -> Decimal | None:
        """Return the median per-period expense magnitude."""


__all__ = ["BalanceSheetPort", "IncomeStatisticsPort"]
