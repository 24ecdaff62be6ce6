"""Domain package for business rules and core models."""

from .constants import (
    CLASSIFICATIONS,
    DEFAULT_TIMELINE,
    EXPENSE,
    INCOME,
    TIMELINE_MONTHS,
)
from .models import (
    Family,
    ForecastConfig,
    FutureEvent,
    Money,
    NetWorthSummary,
    Period,
    Series,
    SeriesValue,
    Trend,
)

__all__ = [
    "CLASSIFICATIONS",
    "DEFAULT_TIMELINE",
    "EXPENSE",
    "INCOME",
    "TIMELINE_MONTHS",
    "Family",
    "ForecastConfig",
    "FutureEvent",
    "Money",
    "NetWorthSummary",
    "Period",
    "Series",
    "SeriesValue",
    "Trend",
]
