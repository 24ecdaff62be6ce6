"""Domain constants for net worth forecasting."""

from decimal import Decimal

INCOME = "income"
EXPENSE = "expense"
CLASSIFICATIONS = (INCOME, EXPENSE)

ASSET = "asset"
LIABILITY = "liability"

ACTIVE_ACCOUNT_STATUSES = ("draft", "active")

# Transfers, one-off items and card payments never count as income/expense.
EXCLUDED_TRANSACTION_KINDS = (
    "funds_movement",
    "one_time",
    "cc_payment",
)

STATS_WINDOW_MONTHS = 24
HISTORY_WINDOW_YEARS = 2
DEFAULT_STATS_INTERVAL = "month"

TIMELINE_MONTHS = {
    "1Y": 12,
    "2Y": 24,
    "5Y": 60,
}
DEFAULT_TIMELINE = "1Y"

MIN_GROWTH_RATE = Decimal("-50")
MAX_GROWTH_RATE = Decimal("100")

MAX_EVENT_NAME_LENGTH = 255
MAX_EVENT_DESCRIPTION_LENGTH = 1000


__all__ = [
    "INCOME",
    "EXPENSE",
    "CLASSIFICATIONS",
    "ASSET",
    "LIABILITY",
    "ACTIVE_ACCOUNT_STATUSES",
    "EXCLUDED_TRANSACTION_KINDS",
    "STATS_WINDOW_MONTHS",
    "HISTORY_WINDOW_YEARS",
    "DEFAULT_STATS_INTERVAL",
    "TIMELINE_MONTHS",
    "DEFAULT_TIMELINE",
    "MIN_GROWTH_RATE",
    "MAX_GROWTH_RATE",
    "MAX_EVENT_NAME_LENGTH",
    "MAX_EVENT_DESCRIPTION_LENGTH",
]
