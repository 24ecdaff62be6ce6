"""Use case assembling a forecast view for presentation layers."""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal

from networth_forecast.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_forecast.application.ports.future_events_repository import (
    FutureEventsRepositoryPort,
)
from networth_forecast.application.ports.net_worth_series import (
    NetWorthSeriesPort,
)
from networth_forecast.application.use_cases.balance_sheet import BalanceSheet
from networth_forecast.application.use_cases.forecast import Forecast
from networth_forecast.application.use_cases.income_statement import (
    IncomeStatement,
)
from networth_forecast.domain.models import (
    Family,
    ForecastConfig,
    Money,
    Series,
)
from networth_forecast.domain.services import build_forecast_config
from networth_forecast.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ForecastView:
    """Forecast scalars and series ready for rendering.

    Attributes:
        family_id: Family the forecast belongs to.
        config: Configuration actually used (after fallback, if any).
        series: Historical points followed by projected points.
        history_end_date: Date of the last historical point, None when the
            family has no history.
        current_net_worth: Net worth today.
        projected_net_worth: Last value of ``series``.
        projection_change: Projected minus current.
        projection_change_percentage: Change relative to |current|, in %.
        monthly_income: Baseline monthly income.
        monthly_expenses: Baseline monthly expenses.
        monthly_cash_flow: Income minus expenses.
        has_sufficient_data: Advisory confidence flag.
        fallback: True when the requested inputs failed and defaults were
            used instead.
    """

    family_id: str
    config: ForecastConfig
    series: Series
    history_end_date: date | None
    current_net_worth: Money
    projected_net_worth: Money
    projection_change: Money
    projection_change_percentage: Decimal
    monthly_income: Money
    monthly_expenses: Money
    monthly_cash_flow: Money
    has_sufficient_data: bool
    fallback: bool = False

    @property
    def timeline(self) -> str:
        return self.config.timeline


class GetForecastUseCase:
    """Compute a forecast view, falling back to defaults on failure."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        series_provider: NetWorthSeriesPort,
        future_events_repository: FutureEventsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing family and finance data.
            series_provider: Port building historical net worth series.
            future_events_repository: Port providing future events.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._series_provider = series_provider
        self._future_events_repository = future_events_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        family_id: str,
        timeline=None,
        income_growth_rate=None,
        expense_growth_rate=None,
        as_of: date | None = None,
    ) -> ForecastView:
        """Return the forecast view for the requested inputs.

        Inputs are parsed leniently: unknown timelines become 1Y and growth
        rates are clamped to [-50, 100] percent. If anything fails while
        computing, the failure is logged and a zero-growth 1Y forecast is
        returned with ``has_sufficient_data`` forced to False.

        Args:
            family_id: Family to forecast.
            timeline: Horizon key (1Y, 2Y, 5Y).
            income_growth_rate: Annual income growth in percent, raw input.
            expense_growth_rate: Annual expense growth in percent, raw input.
            as_of: Reference day; defaults to today.

        Returns:
            ForecastView: Series and scalars for rendering.
        """
        reference_day = as_of or date.today()
        config = build_forecast_config(
            timeline,
            income_growth_rate,
            expense_growth_rate,
        )
        try:
            return self._build_view(family_id, config, reference_day)
        except Exception as exc:
            self._logger.exception(
                f"Forecast error for family={family_id} "
                f"(timeline={config.timeline}, "
                f"income_growth={config.income_growth_rate}, "
                f"expense_growth={config.expense_growth_rate}): {exc}"
            )
        view = self._build_view(family_id, ForecastConfig(), reference_day)
        return replace(view, has_sufficient_data=False, fallback=True)

    def build_forecast(
        self,
        family: Family,
        config: ForecastConfig,
        as_of: date,
    ) -> Forecast:
        """Wire a Forecast with its balance sheet and income statement."""
        balance_sheet = BalanceSheet(
            family,
            self._finance_repository,
            self._series_provider,
            as_of,
            logger=self._logger,
        )
        income_statement = IncomeStatement(
            family,
            self._finance_repository,
            as_of,
            logger=self._logger,
        )
        return Forecast(
            family,
            balance_sheet,
            income_statement,
            self._future_events_repository,
            config,
            as_of,
            logger=self._logger,
        )

    def _build_view(
        self,
        family_id: str,
        config: ForecastConfig,
        as_of: date,
    ) -> ForecastView:
        family = self._finance_repository.fetch_family(family_id)
        forecast = self.build_forecast(family, config, as_of)
        historical = forecast.historical_series()
        return ForecastView(
            family_id=family.id,
            config=config,
            series=forecast.forecast_series(),
            history_end_date=(
                historical.last.date if historical.values else None
            ),
            current_net_worth=forecast.current_net_worth(),
            projected_net_worth=forecast.projected_net_worth(),
            projection_change=forecast.projection_change(),
            projection_change_percentage=(
                forecast.projection_change_percentage()
            ),
            monthly_income=forecast.monthly_income(),
            monthly_expenses=forecast.monthly_expenses(),
            monthly_cash_flow=forecast.monthly_cash_flow(),
            has_sufficient_data=forecast.has_sufficient_data(),
        )


__all__ = ["GetForecastUseCase", "ForecastView"]
