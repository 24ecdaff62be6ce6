"""Income statement of a family: statistics and totals."""

from datetime import date
from decimal import Decimal

from networth_forecast.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_forecast.domain.constants import (
    DEFAULT_STATS_INTERVAL,
    EXPENSE,
    INCOME,
    STATS_WINDOW_MONTHS,
)
from networth_forecast.domain.models import (
    CategoryTotals,
    Family,
    IncomeExpenseStat,
    IncomeStatementTotals,
    Period,
    TransactionEntryRow,
)
from networth_forecast.domain.services import (
    build_rate_map,
    compute_category_totals,
    compute_family_stats,
    compute_search_totals,
    compute_totals,
)
from networth_forecast.domain.services.fx import RateMap
from networth_forecast.infrastructure.logging.logger import get_app_logger
from networth_forecast.utils.date_utils import add_months, beginning_of_month


class IncomeStatement:
    """Income and expense aggregates for one family.

    Every figure goes through the shared entry classification, so the
    statistics, category totals and search totals always agree.
    """

    def __init__(
        self,
        family: Family,
        finance_repository: FinanceRepositoryPort,
        as_of: date,
        logger=None,
    ) -> None:
        """Initialize the income statement.

        Args:
            family: Family whose transactions are aggregated.
            finance_repository: Port providing entries and exchange rates.
            as_of: Reference day closing the trailing statistics window.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._family = family
        self._finance_repository = finance_repository
        self._as_of = as_of
        self._logger = logger or get_app_logger()
        self._stats: dict[str, dict[str, IncomeExpenseStat]] = {}

    @property
    def currency(self) -> str:
        return self._family.currency

    @property
    def stats_window_start(self) -> date:
        """First day of the trailing statistics window."""
        return beginning_of_month(add_months(self._as_of, -STATS_WINDOW_MONTHS))

    def family_stats(
        self,
        interval: str = DEFAULT_STATS_INTERVAL,
    ) -> dict[str, IncomeExpenseStat]:
        """Return median and average per-period totals by classification."""
        if interval not in self._stats:
            window_start = self.stats_window_start
            entries, rate_map = self._load(window_start, self._as_of)
            self._stats[interval] = compute_family_stats(
                entries,
                rate_map,
                interval=interval,
                window_start=window_start,
            )
            self._logger.info(
                f"Income statement stats computed for family={self._family.id} "
                f"interval={interval} from {len(entries)} entries"
            )
        return self._stats[interval]

    def median_income(
        self,
        interval: str = DEFAULT_STATS_INTERVAL,
    ) -> Decimal | None:
        stat = self.family_stats(interval).get(INCOME)
        return stat.median if stat else None

    def median_expense(
        self,
        interval: str = DEFAULT_STATS_INTERVAL,
    ) -> Decimal | None:
        stat = self.family_stats(interval).get(EXPENSE)
        return stat.median if stat else None

    def avg_income(
        self,
        interval: str = DEFAULT_STATS_INTERVAL,
    ) -> Decimal | None:
        stat = self.family_stats(interval).get(INCOME)
        return stat.average if stat else None

    def avg_expense(
        self,
        interval: str = DEFAULT_STATS_INTERVAL,
    ) -> Decimal | None:
        stat = self.family_stats(interval).get(EXPENSE)
        return stat.average if stat else None

    def totals(self, period: Period) -> IncomeStatementTotals:
        """Return income and net expense for the period."""
        entries, rate_map = self._load(period.start_date, period.end_date)
        return compute_totals(entries, rate_map, self.currency)

    def income_totals(self, period: Period) -> CategoryTotals:
        """Return income per category for the period."""
        entries, rate_map = self._load(period.start_date, period.end_date)
        return compute_category_totals(entries, rate_map, INCOME, self.currency)

    def expense_totals(self, period: Period) -> CategoryTotals:
        """Return expense per category for the period.

        This is the budget view: reimbursement categories show negative
        spending and reduce the total.
        """
        entries, rate_map = self._load(period.start_date, period.end_date)
        return compute_category_totals(
            entries,
            rate_map,
            EXPENSE,
            self.currency,
        )

    def search_totals(
        self,
        query: str | None,
        period: Period | None = None,
    ) -> IncomeStatementTotals:
        """Return totals of the entries matching a free-text query."""
        start_date = period.start_date if period else None
        end_date = period.end_date if period else None
        entries, rate_map = self._load(start_date, end_date)
        return compute_search_totals(entries, rate_map, query, self.currency)

    def _load(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> tuple[list[TransactionEntryRow], RateMap]:
        entries = self._finance_repository.fetch_transaction_entries(
            self._family.id,
            start_date,
            end_date,
        )
        rates = self._finance_repository.fetch_exchange_rates(
            self.currency,
            start_date,
            end_date,
        )
        return entries, build_rate_map(rates, self.currency)


__all__ = ["IncomeStatement"]
