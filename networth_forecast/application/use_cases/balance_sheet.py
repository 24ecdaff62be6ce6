"""Balance sheet of a family: current and historical net worth."""

from datetime import date

from networth_forecast.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_forecast.application.ports.net_worth_series import (
    NetWorthSeriesPort,
)
from networth_forecast.domain.constants import DEFAULT_STATS_INTERVAL
from networth_forecast.domain.models import (
    Family,
    Money,
    NetWorthSummary,
    Period,
    Series,
)
from networth_forecast.domain.services import (
    build_rate_map,
    compute_net_worth_summary,
)
from networth_forecast.infrastructure.logging.logger import get_app_logger


class BalanceSheet:
    """Aggregate account totals into net worth for one family."""

    def __init__(
        self,
        family: Family,
        finance_repository: FinanceRepositoryPort,
        series_provider: NetWorthSeriesPort,
        as_of: date,
        logger=None,
    ) -> None:
        """Initialize the balance sheet.

        Args:
            family: Family whose accounts are aggregated.
            finance_repository: Port providing balances and exchange rates.
            series_provider: Port building historical net worth series.
            as_of: Reference day for conversions and default periods.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._family = family
        self._finance_repository = finance_repository
        self._series_provider = series_provider
        self._as_of = as_of
        self._logger = logger or get_app_logger()
        self._summary: NetWorthSummary | None = None

    @property
    def currency(self) -> str:
        return self._family.currency

    def summary(self) -> NetWorthSummary:
        """Return asset, liability and net worth totals."""
        if self._summary is None:
            balances = self._finance_repository.fetch_account_balances(
                self._family.id
            )
            rates = self._finance_repository.fetch_exchange_rates(
                self.currency,
                self._as_of,
                self._as_of,
            )
            self._summary = compute_net_worth_summary(
                balances,
                build_rate_map(rates, self.currency),
                as_of=self._as_of,
                currency=self.currency,
                logger=self._logger,
            )
            self._logger.info(
                f"Net worth computed for family={self._family.id}: "
                f"assets={self._summary.asset_total.amount}, "
                f"liabilities={self._summary.liability_total.amount}"
            )
        return self._summary

    def assets_total(self) -> Money:
        return self.summary().asset_total

    def liabilities_total(self) -> Money:
        return self.summary().liability_total

    def net_worth(self) -> Money:
        """Return assets minus liabilities in the family currency."""
        return self.summary().net_worth

    def net_worth_series(
        self,
        period: Period | None = None,
        interval: str = DEFAULT_STATS_INTERVAL,
    ) -> Series:
        """Return historical net worth points.

        Args:
            period: Window to cover; defaults to the last 30 days.
            interval: Bucket size of the points.

        Returns:
            Series: Net worth snapshots from the series provider.
        """
        resolved = period or Period.last_30_days(self._as_of)
        return self._series_provider.fetch_net_worth_series(
            self._family,
            resolved,
            interval,
        )


__all__ = ["BalanceSheet"]
