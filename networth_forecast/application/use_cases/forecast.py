"""Net worth forecast for one family."""

from datetime import date
from decimal import Decimal

from networth_forecast.application.ports.forecast_inputs import (
    BalanceSheetPort,
    IncomeStatisticsPort,
)
from networth_forecast.application.ports.future_events_repository import (
    FutureEventsRepositoryPort,
)
from networth_forecast.domain.constants import (
    DEFAULT_STATS_INTERVAL,
    HISTORY_WINDOW_YEARS,
)
from networth_forecast.domain.models import (
    Family,
    ForecastConfig,
    FutureEvent,
    Money,
    Period,
    Series,
)
from networth_forecast.domain.services import (
    has_sufficient_data,
    project_net_worth,
    projected_monthly_cash_flow,
    projection_change_percentage,
)
from networth_forecast.infrastructure.logging.logger import get_app_logger
from networth_forecast.utils.date_utils import add_months, end_of_month


class Forecast:
    """Project a family's net worth over a timeline.

    The forecast only reads from its collaborators. The projected series is
    computed once per instance and every scalar (projected net worth, change,
    change percentage) is derived from that same series, so the headline
    number always matches the chart's last point.
    """

    def __init__(
        self,
        family: Family,
        balance_sheet: BalanceSheetPort,
        income_statement: IncomeStatisticsPort,
        future_events_repository: FutureEventsRepositoryPort,
        config: ForecastConfig,
        as_of: date,
        logger=None,
    ) -> None:
        """Initialize the forecast.

        Args:
            family: Family being projected.
            balance_sheet: Source of current and historical net worth.
            income_statement: Source of trailing median income/expense.
            future_events_repository: Source of declared future events.
            config: Timeline and growth rates as decimals.
            as_of: Reference day standing in for "today".
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self.family = family
        self.config = config
        self.as_of = as_of
        self._balance_sheet = balance_sheet
        self._income_statement = income_statement
        self._future_events_repository = future_events_repository
        self._logger = logger or get_app_logger()
        self._historical: Series | None = None
        self._series: Series | None = None
        self._events: tuple[FutureEvent, ...] | None = None

    @property
    def currency(self) -> str:
        return self.family.currency

    @property
    def timeline(self) -> str:
        return self.config.timeline

    @property
    def months(self) -> int:
        return self.config.months

    def current_net_worth(self) -> Money:
        return self._balance_sheet.net_worth()

    def monthly_income(self) -> Money:
        raw = self._income_statement.median_income(
            interval=DEFAULT_STATS_INTERVAL
        )
        return Money(raw or Decimal("0"), self.currency)

    def monthly_expenses(self) -> Money:
        raw = self._income_statement.median_expense(
            interval=DEFAULT_STATS_INTERVAL
        )
        return Money(abs(raw or Decimal("0")), self.currency)

    def monthly_cash_flow(self) -> Money:
        return self.monthly_income() - self.monthly_expenses()

    def projected_monthly_cash_flow(self) -> Money:
        """Cash flow of the first projected month, growth applied once."""
        return projected_monthly_cash_flow(
            self.monthly_income(),
            self.monthly_expenses(),
            self.config,
        )

    def historical_period(self) -> Period:
        """Two years of whole months ending with the current month."""
        return Period.trailing_years(self.as_of, HISTORY_WINDOW_YEARS)

    def historical_series(self) -> Series:
        if self._historical is None:
            self._historical = self._balance_sheet.net_worth_series(
                period=self.historical_period(),
                interval=DEFAULT_STATS_INTERVAL,
            )
        return self._historical

    def future_events(self) -> tuple[FutureEvent, ...]:
        """Snapshot of the events that can affect the projection.

        Fetched once per forecast, from the reference day through the end of
        the last projected month.
        """
        if self._events is None:
            historical = self.historical_series()
            anchor = historical.last.date if historical.values else self.as_of
            window_end = end_of_month(add_months(anchor, self.months))
            if window_end < self.as_of:
                self._events = ()
            else:
                self._events = tuple(
                    self._future_events_repository.list_between(
                        self.family.id,
                        self.as_of,
                        window_end,
                    )
                )
        return self._events

    def forecast_series(self) -> Series:
        """Historical net worth followed by one projected point per month."""
        if self._series is None:
            historical = self.historical_series()
            if historical.is_empty:
                self._logger.warning(
                    f"No historical net worth for family={self.family.id}; "
                    "forecast has no anchor point"
                )
                self._series = historical
            else:
                self._series = project_net_worth(
                    historical,
                    monthly_income=self.monthly_income(),
                    monthly_expenses=self.monthly_expenses(),
                    config=self.config,
                    events=self.future_events(),
                )
                self._logger.info(
                    f"Forecast computed for family={self.family.id}: "
                    f"timeline={self.timeline}, "
                    f"points={len(self._series)}"
                )
        return self._series

    def projected_net_worth(self) -> Money:
        """Final value of the forecast series."""
        series = self.forecast_series()
        if series.is_empty:
            return self.current_net_worth()
        return series.last.value

    def projection_change(self) -> Money:
        return self.projected_net_worth() - self.current_net_worth()

    def projection_change_percentage(self) -> Decimal:
        return projection_change_percentage(
            self.current_net_worth(),
            self.projected_net_worth(),
        )

    def has_sufficient_data(self) -> bool:
        """Whether the projection rests on enough data to be trusted.

        Advisory only: the series is computed either way. History points
        are counted on the 2-year monthly series the projection starts from.
        """
        return has_sufficient_data(
            len(self.historical_series()),
            self.monthly_income(),
            self.monthly_expenses(),
        )


__all__ = ["Forecast"]
