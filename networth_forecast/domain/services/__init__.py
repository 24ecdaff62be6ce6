"""Domain services package."""

from .balance_sheet import build_net_worth_series, compute_net_worth_summary
from .classification import (
    ClassifiedAmount,
    classify_entry,
    classify_entry_with_rates,
    is_eligible_entry,
)
from .forecast import (
    build_forecast_config,
    has_sufficient_data,
    monthly_compound_rate,
    months_in_timeline,
    parse_growth_rate,
    project_net_worth,
    projected_monthly_cash_flow,
    projection_change_percentage,
    resolve_timeline,
)
from .future_events import ValidationErrors, validate_future_event
from .fx import build_rate_map, resolve_rate
from .income_statement import (
    compute_category_totals,
    compute_family_stats,
    compute_search_totals,
    compute_totals,
)
from .validation import validate_balance_sign

__all__ = [
    "ClassifiedAmount",
    "ValidationErrors",
    "build_forecast_config",
    "build_net_worth_series",
    "build_rate_map",
    "classify_entry",
    "classify_entry_with_rates",
    "compute_category_totals",
    "compute_family_stats",
    "compute_net_worth_summary",
    "compute_search_totals",
    "compute_totals",
    "has_sufficient_data",
    "is_eligible_entry",
    "monthly_compound_rate",
    "months_in_timeline",
    "parse_growth_rate",
    "project_net_worth",
    "projected_monthly_cash_flow",
    "projection_change_percentage",
    "resolve_rate",
    "resolve_timeline",
    "validate_balance_sign",
    "validate_future_event",
]
