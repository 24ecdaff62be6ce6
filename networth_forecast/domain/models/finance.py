"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from networth_forecast.domain.constants import DEFAULT_TIMELINE, TIMELINE_MONTHS
from networth_forecast.domain.models.money import Money


@dataclass(frozen=True)
class Family:
    """Household aggregate owning accounts and future events."""

    id: str
    name: str
    currency: str


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset balances.
        liability_total: Sum of liability balances.
        net_worth: Assets minus liabilities.
    """

    asset_total: Money
    liability_total: Money
    net_worth: Money

    @property
    def currency_code(self) -> str:
        return self.net_worth.currency


@dataclass(frozen=True)
class IncomeExpenseStat:
    """Median and average of per-period totals for one classification."""

    classification: str
    median: Decimal
    average: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Total of classified amounts for a single category."""

    category_id: str | None
    category_name: str
    total: Money
    transactions_count: int


@dataclass(frozen=True)
class CategoryTotals:
    """Per-category totals for one classification."""

    classification: str
    total: Money
    category_totals: list[CategoryTotal] = field(default_factory=list)


@dataclass(frozen=True)
class IncomeStatementTotals:
    """Income and net expense over a set of transactions."""

    transactions_count: int
    income: Money
    expense: Money

    @property
    def net(self) -> Money:
        return self.income - self.expense


@dataclass(frozen=True)
class ForecastConfig:
    """Validated forecast inputs.

    Attributes:
        timeline: Horizon key (1Y, 2Y or 5Y).
        income_growth_rate: Annual income growth as a decimal (0.05 = 5%).
        expense_growth_rate: Annual expense growth as a decimal.
    """

    timeline: str = DEFAULT_TIMELINE
    income_growth_rate: Decimal = Decimal("0")
    expense_growth_rate: Decimal = Decimal("0")

    @property
    def months(self) -> int:
        return TIMELINE_MONTHS[self.timeline]


__all__ = [
    "Family",
    "NetWorthSummary",
    "IncomeExpenseStat",
    "CategoryTotal",
    "CategoryTotals",
    "IncomeStatementTotals",
    "ForecastConfig",
]
