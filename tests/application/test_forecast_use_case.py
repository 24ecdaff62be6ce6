"""Tests for the Forecast use case."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from networth_forecast.application.use_cases.forecast import Forecast
from networth_forecast.domain.models import (
    Family,
    ForecastConfig,
    FutureEvent,
    Money,
    Period,
    Series,
    SeriesValue,
)

FAMILY = Family(id="fam", name="Home", currency="EUR")
AS_OF = date(2024, 6, 15)


def _eur(amount: str) -> Money:
    return Money(Decimal(amount), "EUR")


def _history(*points: tuple[date, str]) -> Series:
    return Series(
        start_date=date(2022, 6, 1),
        end_date=date(2024, 6, 30),
        interval="month",
        values=tuple(
            SeriesValue(day, day.isoformat(), _eur(amount))
            for day, amount in points
        ),
    )


def _build_forecast(
    history: Series,
    income: str | None = "5000",
    expense: str | None = "4000",
    events: list[FutureEvent] | None = None,
    config: ForecastConfig | None = None,
) -> tuple[Forecast, MagicMock, MagicMock, MagicMock]:
    balance_sheet = MagicMock()
    balance_sheet.net_worth.return_value = _eur("10000")
    balance_sheet.net_worth_series.return_value = history
    income_statement = MagicMock()
    income_statement.median_income.return_value = (
        Decimal(income) if income is not None else None
    )
    income_statement.median_expense.return_value = (
        Decimal(expense) if expense is not None else None
    )
    events_repository = MagicMock()
    events_repository.list_between.return_value = events or []
    logger = MagicMock()
    forecast = Forecast(
        FAMILY,
        balance_sheet,
        income_statement,
        events_repository,
        config or ForecastConfig(),
        AS_OF,
        logger=logger,
    )
    return forecast, balance_sheet, events_repository, logger


def _three_months() -> Series:
    return _history(
        (date(2024, 3, 31), "9000"),
        (date(2024, 4, 30), "9500"),
        (date(2024, 5, 31), "10000"),
    )


def test_forecast_series_is_computed_once_and_matches_scalars() -> None:
    forecast, balance_sheet, _, _ = _build_forecast(_three_months())

    series = forecast.forecast_series()

    assert forecast.forecast_series() is series
    assert len(series) == 3 + 12
    assert forecast.projected_net_worth() == series.last.value
    assert forecast.projected_net_worth() == _eur("22000")
    assert forecast.projection_change() == _eur("12000")
    assert forecast.projection_change_percentage() == Decimal("120.0")
    balance_sheet.net_worth_series.assert_called_once_with(
        period=Period(date(2022, 6, 1), date(2024, 6, 30)),
        interval="month",
    )


def test_events_fetched_once_over_the_projection_window() -> None:
    bonus = FutureEvent(
        family_id="fam",
        name="Bonus",
        date=date(2024, 12, 20),
        amount=Decimal("3000"),
        classification="income",
        id="evt",
    )
    forecast, _, events_repository, _ = _build_forecast(
        _three_months(),
        events=[bonus],
    )

    forecast.forecast_series()
    forecast.projected_net_worth()

    events_repository.list_between.assert_called_once_with(
        "fam",
        AS_OF,
        date(2025, 5, 31),
    )
    assert forecast.projected_net_worth() == _eur("25000")


def test_cash_flow_uses_absolute_expense_median() -> None:
    forecast, _, _, _ = _build_forecast(
        _three_months(),
        income="5000",
        expense="-4000",
        config=ForecastConfig(income_growth_rate=Decimal("0.12")),
    )

    assert forecast.monthly_expenses() == _eur("4000")
    assert forecast.monthly_cash_flow() == _eur("1000")
    projected = forecast.projected_monthly_cash_flow().amount
    assert abs(projected - Decimal("1047.44")) < Decimal("0.01")


def test_empty_history_falls_back_to_current_net_worth() -> None:
    forecast, _, events_repository, logger = _build_forecast(_history())

    assert forecast.forecast_series().is_empty
    assert forecast.projected_net_worth() == _eur("10000")
    assert forecast.projection_change_percentage() == Decimal("0.0")
    assert forecast.has_sufficient_data() is False
    events_repository.list_between.assert_not_called()
    logger.warning.assert_called_once()


def test_sufficient_data_needs_three_points_and_both_medians() -> None:
    full, _, _, _ = _build_forecast(_three_months())
    short, _, _, _ = _build_forecast(
        _history((date(2024, 4, 30), "1"), (date(2024, 5, 31), "2")),
    )
    no_income, _, _, _ = _build_forecast(_three_months(), income=None)

    assert full.has_sufficient_data() is True
    assert short.has_sufficient_data() is False
    assert no_income.has_sufficient_data() is False
    assert no_income.monthly_income() == _eur("0")
