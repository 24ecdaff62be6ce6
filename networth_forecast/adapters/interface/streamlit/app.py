"""Streamlit forecast page entry point."""

from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from networth_forecast.adapters.interface.streamlit.forecast_chart import (
    FORECAST,
    HISTORICAL,
    TIMELINE_OPTIONS,
    has_chart_data,
    prepare_chart_data,
    projection_trend,
    timeline_label,
)
from networth_forecast.application.use_cases.get_forecast import ForecastView
from networth_forecast.application.use_cases.manage_future_events import (
    FutureEventNotFoundError,
    ManageFutureEventsUseCase,
)
from networth_forecast.domain.constants import CLASSIFICATIONS
from networth_forecast.domain.models import FutureEvent
from networth_forecast.infrastructure.container import (
    build_get_forecast_use_case,
    build_manage_future_events_use_case,
)
from networth_forecast.infrastructure.logging.logger import get_usage_logger
from networth_forecast.infrastructure.settings import ForecastSettings

_SETTINGS = ForecastSettings.from_env()


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy and pandas installs Altair relies on are usable.

    Returns:
        Tuple of (ok, error message).
    """
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, (
            "numpy is installed but incomplete (missing ndarray); "
            "reinstall numpy to render charts."
        )
    if not hasattr(pandas, "Timestamp"):
        return False, (
            "pandas is installed but incomplete (missing Timestamp); "
            "reinstall pandas to render charts."
        )
    return True, None


def _fetch_forecast(
    family_id: str,
    timeline: str,
    income_growth_rate: float,
    expense_growth_rate: float,
    as_of: date,
) -> ForecastView:
    """Compute the forecast view from the finance database."""
    use_case = build_get_forecast_use_case()
    return use_case.execute(
        family_id,
        timeline=timeline,
        income_growth_rate=income_growth_rate,
        expense_growth_rate=expense_growth_rate,
        as_of=as_of,
    )


@st.cache_data(show_spinner=False, ttl=_SETTINGS.cache_ttl_seconds)
def _load_forecast(
    family_id: str,
    timeline: str,
    income_growth_rate: float,
    expense_growth_rate: float,
    as_of: date,
) -> ForecastView:
    """Cached wrapper around _fetch_forecast."""
    return _fetch_forecast(
        family_id,
        timeline,
        income_growth_rate,
        expense_growth_rate,
        as_of,
    )


def _build_events_use_case() -> ManageFutureEventsUseCase:
    return build_manage_future_events_use_case()


def _format_percent(value: Decimal) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{value}%"


def _submit_future_event(
    use_case: ManageFutureEventsUseCase,
    family_id: str,
    values: dict,
    today: date,
) -> tuple[bool, str]:
    """Create a future event from form values.

    Returns:
        Tuple of (created, message to display).
    """
    result = use_case.create(
        family_id,
        name=values.get("name", ""),
        date=values.get("date"),
        amount=values.get("amount"),
        classification=values.get("classification", ""),
        description=values.get("description") or None,
        today=today,
    )
    if not result.ok:
        return False, ", ".join(result.full_messages())
    return True, "Future event added successfully."


def _delete_future_event(
    use_case: ManageFutureEventsUseCase,
    family_id: str,
    event_id: str,
) -> tuple[bool, str]:
    """Delete a future event, reporting a missing one instead of raising."""
    try:
        use_case.delete(family_id, event_id)
    except FutureEventNotFoundError as exc:
        return False, str(exc)
    return True, "Future event deleted successfully."


def _events_table(
    events: list[FutureEvent],
    currency: str,
) -> list[dict[str, str]]:
    return [
        {
            "Date": event.date.isoformat(),
            "Name": event.name,
            "Type": event.classification.capitalize(),
            "Amount": event.amount_money(currency).format(),
            "Description": event.description or "",
        }
        for event in events
    ]


def _render_metrics(view: ForecastView) -> None:
    """Render the headline numbers above the chart."""
    trend = projection_trend(view)
    current_col, projected_col, cash_flow_col = st.columns(3)
    current_col.metric("Current Net Worth", view.current_net_worth.format())
    projected_col.metric(
        f"Projected in {timeline_label(view.timeline)}",
        view.projected_net_worth.format(),
        f"{view.projection_change.format()} "
        f"({_format_percent(view.projection_change_percentage)})",
        delta_color="normal" if trend.direction != "flat" else "off",
    )
    cash_flow_col.metric(
        "Monthly Cash Flow",
        view.monthly_cash_flow.format(),
        f"Income {view.monthly_income.format()} / "
        f"Expenses {view.monthly_expenses.format()}",
        delta_color="off",
    )


def _render_forecast_chart(view: ForecastView) -> None:
    """Render historical and projected net worth as two joined lines."""
    if not has_chart_data(view):
        st.info("No net worth history available to forecast from.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return
    data = prepare_chart_data(view)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        strokeWidth=2,
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("value:Q", title=view.current_net_worth.currency),
        color=alt.Color(
            "segment:N",
            scale=alt.Scale(
                domain=[HISTORICAL, FORECAST],
                range=["#1b9aaa", "#f4a261"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        strokeDash=alt.condition(
            alt.datum.segment == FORECAST,
            alt.value([6, 4]),
            alt.value([1, 0]),
        ),
        tooltip=[
            alt.Tooltip("date_label:N", title="Date"),
            alt.Tooltip("value_label:N", title="Net worth"),
            alt.Tooltip("segment:N", title="Series"),
        ],
    ).properties(height=380)
    st.altair_chart(chart, width="stretch")


def _render_future_events(family_id: str, currency: str, today: date) -> None:
    """Render the future events list with add and delete controls."""
    use_case = _build_events_use_case()
    st.subheader("Future Events")
    events = use_case.list(family_id)
    if events:
        st.dataframe(
            _events_table(events, currency),
            width="stretch",
            hide_index=True,
        )
    else:
        st.caption("No future events declared.")

    with st.form("future_event_form", clear_on_submit=True):
        name = st.text_input("Name")
        event_date = st.date_input("Date", value=today)
        amount = st.number_input("Amount", min_value=0.0, step=100.0)
        classification = st.selectbox("Type", options=list(CLASSIFICATIONS))
        description = st.text_area("Description")
        submitted = st.form_submit_button("Add event")
    if submitted:
        created, message = _submit_future_event(
            use_case,
            family_id,
            {
                "name": name,
                "date": event_date,
                "amount": str(amount),
                "classification": classification,
                "description": description,
            },
            today,
        )
        if created:
            _load_forecast.clear()
            st.success(message)
        else:
            st.error(message)

    if events:
        labels = {
            event.id: f"{event.date.isoformat()} · {event.name}"
            for event in events
        }
        selected = st.selectbox(
            "Remove event",
            options=list(labels),
            format_func=labels.get,
        )
        if st.button("Delete event"):
            deleted, message = _delete_future_event(
                use_case,
                family_id,
                selected,
            )
            if deleted:
                _load_forecast.clear()
                st.success(message)
            else:
                st.error(message)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Forecast", layout="wide")
    st.title("Net Worth Forecast")

    family_id = st.sidebar.text_input(
        "Family ID",
        value=_SETTINGS.family_id or "",
    ).strip()
    if not family_id:
        st.warning("Set FORECAST_FAMILY_ID or enter a family to forecast.")
        return

    timeline_keys = [key for _, key in TIMELINE_OPTIONS]
    labels = dict((key, label) for label, key in TIMELINE_OPTIONS)
    timeline = st.sidebar.selectbox(
        "Timeline",
        options=timeline_keys,
        index=timeline_keys.index(_SETTINGS.default_timeline),
        format_func=labels.get,
    )
    income_growth = st.sidebar.number_input(
        "Income growth (% per year)",
        min_value=-50.0,
        max_value=100.0,
        value=0.0,
        step=0.5,
    )
    expense_growth = st.sidebar.number_input(
        "Expense growth (% per year)",
        min_value=-50.0,
        max_value=100.0,
        value=0.0,
        step=0.5,
    )
    today = date.today()
    get_usage_logger().info(
        f"Forecast page: family={family_id}, timeline={timeline}, "
        f"income_growth={income_growth}, expense_growth={expense_growth}"
    )

    try:
        view = _load_forecast(
            family_id,
            timeline,
            income_growth,
            expense_growth,
            today,
        )
    except Exception as exc:
        st.error(f"Forecast unavailable: {exc}")
        return

    if view.fallback:
        st.warning(
            "The forecast could not be computed with these settings; "
            "showing a 1 year projection without growth."
        )
    if not view.has_sufficient_data:
        st.warning(
            "Limited history or income/expense data: treat this projection "
            "as a rough estimate."
        )
    _render_metrics(view)
    _render_forecast_chart(view)
    _render_future_events(family_id, view.current_net_worth.currency, today)


if __name__ == "__main__":  # pragma: no cover
    main()
