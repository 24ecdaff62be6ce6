"""Presentation helpers for the forecast chart.

Kept free of Streamlit calls so the data handed to Altair can be checked
without a running session.
"""

from datetime import date

from networth_forecast.application.use_cases.get_forecast import ForecastView
from networth_forecast.domain.constants import DEFAULT_TIMELINE
from networth_forecast.domain.models import Trend

HISTORICAL = "Historical"
FORECAST = "Forecast"

TIMELINE_OPTIONS: list[tuple[str, str]] = [
    ("1 Year", "1Y"),
    ("2 Years", "2Y"),
    ("5 Years", "5Y"),
]

_TIMELINE_LABELS = {"1Y": "1 year", "2Y": "2 years", "5Y": "5 years"}


def timeline_label(timeline: str) -> str:
    """Return the human label for a timeline key, 1 year when unknown."""
    return _TIMELINE_LABELS.get(timeline, _TIMELINE_LABELS[DEFAULT_TIMELINE])


def projection_trend(view: ForecastView) -> Trend:
    """Trend from the current to the projected net worth."""
    return Trend(
        current=view.projected_net_worth,
        previous=view.current_net_worth,
    )


def has_chart_data(view: ForecastView) -> bool:
    return not view.series.is_empty


def prepare_chart_data(view: ForecastView) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows split into historical and forecast lines.

    The last historical point is repeated at the start of the forecast
    segment so both lines join.

    Args:
        view: Forecast view returned by the use case.

    Returns:
        list[dict]: One row per point and segment.
    """
    history_end = view.history_end_date
    data: list[dict[str, str | float]] = []
    for point in view.series.values:
        is_history = history_end is not None and point.date <= history_end
        segment = HISTORICAL if is_history else FORECAST
        data.append(_chart_row(point.date, point.date_formatted, point, segment))
        if history_end is not None and point.date == history_end:
            data.append(
                _chart_row(point.date, point.date_formatted, point, FORECAST)
            )
    return data


def _chart_row(
    point_date: date,
    date_label: str,
    point,
    segment: str,
) -> dict[str, str | float]:
    return {
        "date": point_date.isoformat(),
        "date_label": date_label,
        "value": float(point.value.amount),
        "value_label": point.value.format(),
        "segment": segment,
    }


__all__ = [
    "HISTORICAL",
    "FORECAST",
    "TIMELINE_OPTIONS",
    "timeline_label",
    "projection_trend",
    "has_chart_data",
    "prepare_chart_data",
]
