"""CLI adapter printing a net worth forecast for one family.

Inputs come from environment variables so the job can run from cron or a
container without arguments:

- ``FORECAST_FAMILY_ID`` (required)
- ``FORECAST_TIMELINE`` (1Y, 2Y or 5Y; defaults to the configured timeline)
- ``FORECAST_INCOME_GROWTH`` / ``FORECAST_EXPENSE_GROWTH`` (percent per year)
- ``FORECAST_AS_OF`` (ISO date standing in for today)
"""

import os
from datetime import date

from networth_forecast.application.use_cases.get_forecast import ForecastView
from networth_forecast.infrastructure.container import (
    build_get_forecast_use_case,
)
from networth_forecast.infrastructure.logging.logger import get_app_logger
from networth_forecast.infrastructure.settings import ForecastSettings


def _parse_as_of(raw: str | None) -> date:
    if not raw:
        return date.today()
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"Invalid FORECAST_AS_OF date: {raw}") from exc


def format_forecast(view: ForecastView) -> list[str]:
    """Return the printable summary lines of a forecast view."""
    lines = [
        f"Family: {view.family_id}",
        f"Timeline: {view.timeline}",
        f"Current net worth: {view.current_net_worth.format()}",
        f"Projected net worth: {view.projected_net_worth.format()}",
        (
            f"Change: {view.projection_change.format()} "
            f"({view.projection_change_percentage}%)"
        ),
        f"Monthly income: {view.monthly_income.format()}",
        f"Monthly expenses: {view.monthly_expenses.format()}",
        f"Monthly cash flow: {view.monthly_cash_flow.format()}",
    ]
    if view.fallback:
        lines.append("Warning: fell back to a 1Y forecast without growth.")
    if not view.has_sufficient_data:
        lines.append("Warning: insufficient data, low confidence projection.")
    return lines


def main() -> None:
    """Compute and print the forecast configured in the environment."""
    logger = get_app_logger()
    settings = ForecastSettings.from_env()
    if not settings.family_id:
        raise RuntimeError("Missing environment variable: FORECAST_FAMILY_ID")

    use_case = build_get_forecast_use_case()
    view = use_case.execute(
        settings.family_id,
        timeline=os.getenv("FORECAST_TIMELINE", settings.default_timeline),
        income_growth_rate=os.getenv("FORECAST_INCOME_GROWTH"),
        expense_growth_rate=os.getenv("FORECAST_EXPENSE_GROWTH"),
        as_of=_parse_as_of(os.getenv("FORECAST_AS_OF")),
    )
    logger.info(
        f"Forecast CLI: family={view.family_id}, points={len(view.series)}"
    )
    for line in format_forecast(view):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
