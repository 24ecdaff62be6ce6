"""Domain services for net worth projections.

The projection walks month by month from the last historical point. Income
and expenses compound separately at their own monthly rates before being
netted, and declared future events are overlaid on the month they fall in.
"""

from collections.abc import Iterable
from decimal import Decimal

from networth_forecast.domain.constants import (
    DEFAULT_TIMELINE,
    MAX_GROWTH_RATE,
    MIN_GROWTH_RATE,
    TIMELINE_MONTHS,
)
from networth_forecast.domain.models import (
    ForecastConfig,
    FutureEvent,
    Money,
    Series,
    SeriesValue,
)
from networth_forecast.utils.date_utils import add_months, format_long_date
from networth_forecast.utils.decimal_utils import (
    parse_lenient_decimal,
    round_one_decimal,
)


ONE = Decimal("1")
MONTHS_PER_YEAR = Decimal("12")


def resolve_timeline(timeline) -> str:
    """Return a known timeline key, defaulting to 1Y."""
    if isinstance(timeline, str) and timeline in TIMELINE_MONTHS:
        return timeline
    return DEFAULT_TIMELINE


def months_in_timeline(timeline) -> int:
    """Return the horizon in months for a timeline key."""
    return TIMELINE_MONTHS[resolve_timeline(timeline)]


def parse_growth_rate(raw) -> Decimal:
    """Parse a growth-rate percentage and clamp it to [-50, 100].

    Args:
        raw: Free-form text or number, e.g. ``"3.5"`` or ``"3.5%"``.

    Returns:
        Decimal: Percentage; 0 when nothing numeric could be parsed.
    """
    value = parse_lenient_decimal(raw)
    return min(max(value, MIN_GROWTH_RATE), MAX_GROWTH_RATE)


def build_forecast_config(
    timeline=None,
    income_growth_rate=None,
    expense_growth_rate=None,
) -> ForecastConfig:
    """Build a forecast configuration from raw user inputs.

    Unknown timelines fall back to 1Y and rates are parsed leniently,
    clamped, then converted from percentages to decimals. Nothing here
    raises on bad input.
    """
    return ForecastConfig(
        timeline=resolve_timeline(timeline),
        income_growth_rate=parse_growth_rate(income_growth_rate) / 100,
        expense_growth_rate=parse_growth_rate(expense_growth_rate) / 100,
    )


def monthly_compound_rate(annual_rate: Decimal) -> Decimal:
    """Convert an annual growth rate into the equivalent monthly rate.

    ``(1 + r) ** (1 / 12) - 1``; a zero rate stays exactly zero.
    """
    if annual_rate == 0:
        return Decimal("0")
    return (ONE + annual_rate) ** (ONE / MONTHS_PER_YEAR) - ONE


def compounded_amount(
    base: Decimal,
    monthly_rate: Decimal,
    month: int,
) -> Decimal:
    """Return ``base`` grown for ``month`` months at ``monthly_rate``."""
    if monthly_rate == 0:
        return base
    return base * (ONE + monthly_rate) ** month


def group_events_by_month(
    events: Iterable[FutureEvent],
) -> dict[tuple[int, int], tuple[FutureEvent, ...]]:
    """Index events by (year, month) of their date."""
    grouped: dict[tuple[int, int], list[FutureEvent]] = {}
    for event in sorted(events, key=lambda item: (item.date, item.name)):
        grouped.setdefault((event.date.year, event.date.month), []).append(event)
    return {key: tuple(items) for key, items in grouped.items()}


def project_net_worth(
    historical: Series,
    *,
    monthly_income: Money,
    monthly_expenses: Money,
    config: ForecastConfig,
    events: Iterable[FutureEvent] = (),
) -> Series:
    """Extend a historical net worth series with monthly projections.

    Args:
        historical: Historical net worth series; its last point anchors the
            projection.
        monthly_income: Baseline monthly income magnitude.
        monthly_expenses: Baseline monthly expense magnitude.
        config: Timeline and annual growth rates.
        events: Future events snapshot, read once before projecting.

    Returns:
        Series: Historical points followed by one point per projected month.
        An empty historical series is returned unchanged.
    """
    if historical.is_empty:
        return historical

    anchor = historical.last
    currency = anchor.value.currency
    last_date = anchor.date
    running_net_worth = anchor.value.amount
    base_income = monthly_income.amount
    base_expenses = monthly_expenses.amount
    income_rate = monthly_compound_rate(config.income_growth_rate)
    expense_rate = monthly_compound_rate(config.expense_growth_rate)
    events_by_month = group_events_by_month(events)

    projected: list[SeriesValue] = []
    for month in range(1, config.months + 1):
        forecast_date = add_months(last_date, month)
        income = compounded_amount(base_income, income_rate, month)
        expenses = compounded_amount(base_expenses, expense_rate, month)
        running_net_worth += income - expenses

        for event in events_by_month.get(
            (forecast_date.year, forecast_date.month),
            (),
        ):
            if event.is_income:
                running_net_worth += event.amount
            else:
                running_net_worth -= event.amount

        projected.append(
            SeriesValue(
                date=forecast_date,
                date_formatted=format_long_date(forecast_date),
                value=Money(running_net_worth, currency),
                trend=None,
            )
        )

    return Series(
        start_date=historical.start_date,
        end_date=projected[-1].date,
        interval=historical.interval,
        values=historical.values + tuple(projected),
    )


def projected_monthly_cash_flow(
    monthly_income: Money,
    monthly_expenses: Money,
    config: ForecastConfig,
) -> Money:
    """Cash flow of the first projected month after one step of growth."""
    if (monthly_income - monthly_expenses).is_zero():
        return Money.zero(monthly_income.currency)
    income = compounded_amount(
        monthly_income.amount,
        monthly_compound_rate(config.income_growth_rate),
        1,
    )
    expenses = compounded_amount(
        monthly_expenses.amount,
        monthly_compound_rate(config.expense_growth_rate),
        1,
    )
    return Money(income - expenses, monthly_income.currency)


def projection_change_percentage(current: Money, projected: Money) -> Decimal:
    """Change from current to projected net worth, in percent.

    Relative to the magnitude of the current value and rounded to one
    decimal; exactly 0.0 when the current value is zero.
    """
    if current.is_zero():
        return Decimal("0.0")
    change = (projected - current).amount
    percent = change / abs(current.amount) * Decimal("100")
    return round_one_decimal(percent)


def has_sufficient_data(
    history_points: int,
    monthly_income: Money,
    monthly_expenses: Money,
) -> bool:
    """Advisory confidence gate for a projection."""
    return (
        history_points >= 3
        and not monthly_income.is_zero()
        and not monthly_expenses.is_zero()
    )


__all__ = [
    "resolve_timeline",
    "months_in_timeline",
    "parse_growth_rate",
    "build_forecast_config",
    "monthly_compound_rate",
    "compounded_amount",
    "group_events_by_month",
    "project_net_worth",
    "projected_monthly_cash_flow",
    "projection_change_percentage",
    "has_sufficient_data",
]
