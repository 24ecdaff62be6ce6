"""Domain services for balance sheet aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from networth_forecast.domain.constants import (
    ACTIVE_ACCOUNT_STATUSES,
    ASSET,
    LIABILITY,
)
from networth_forecast.domain.models import (
    AccountBalanceRow,
    Money,
    NetWorthSnapshotRow,
    NetWorthSummary,
    Period,
    Series,
    SeriesValue,
    Trend,
)
from networth_forecast.domain.services.fx import RateMap
from networth_forecast.domain.services.validation import validate_balance_sign
from networth_forecast.utils.date_utils import format_long_date, truncate_date
from networth_forecast.utils.decimal_utils import coerce_decimal


def compute_net_worth_summary(
    balances: Iterable[AccountBalanceRow],
    rate_map: RateMap,
    *,
    as_of: date,
    currency: str,
    logger: Logger,
) -> NetWorthSummary:
    """Compute net worth totals from account balances.

    Args:
        balances: Current account balances from the repository.
        rate_map: Exchange rates into ``currency``.
        as_of: Day whose exchange rates convert foreign balances.
        currency: Family currency.
        logger: Logger used for warnings.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals.
    """
    asset_total = Decimal("0")
    liability_total = Decimal("0")

    for row in balances:
        if row.status not in ACTIVE_ACCOUNT_STATUSES:
            continue
        if row.classification not in (ASSET, LIABILITY):
            continue
        balance = coerce_decimal(row.balance)
        validate_balance_sign(row.classification, balance, row.name, logger)
        rate = _account_rate(row, rate_map, as_of, currency, logger)
        converted = balance * rate
        if row.classification == ASSET:
            asset_total += converted
        else:
            liability_total += abs(converted)

    return NetWorthSummary(
        asset_total=Money(asset_total, currency),
        liability_total=Money(liability_total, currency),
        net_worth=Money(asset_total - liability_total, currency),
    )


def _account_rate(
    row: AccountBalanceRow,
    rate_map: RateMap,
    as_of: date,
    currency: str,
    logger: Logger,
) -> Decimal:
    if row.currency == currency:
        return Decimal("1")
    rate = rate_map.get((as_of, row.currency))
    if not rate:
        logger.warning(
            f"Missing FX rate for {row.currency} to {currency} on {as_of}, "
            "using 1"
        )
        return Decimal("1")
    return rate


def build_net_worth_series(
    snapshots: Iterable[NetWorthSnapshotRow],
    *,
    period: Period,
    interval: str,
    currency: str,
) -> Series:
    """Build a net worth series from per-bucket snapshots.

    Snapshots outside the period are dropped; when several snapshots fall in
    the same interval bucket the latest one wins. Each point carries a trend
    against the previous point.

    Args:
        snapshots: Asset and liability totals by date.
        period: Window the series covers.
        interval: Bucket size of the series.
        currency: Family currency.

    Returns:
        Series: Net worth points in ascending date order.
    """
    by_bucket: dict[date, NetWorthSnapshotRow] = {}
    for row in sorted(snapshots, key=lambda item: item.date):
        if not period.contains(row.date):
            continue
        by_bucket[truncate_date(row.date, interval)] = row

    values: list[SeriesValue] = []
    previous: Money | None = None
    for row in by_bucket.values():
        value = Money(
            coerce_decimal(row.asset_total) - coerce_decimal(row.liability_total),
            currency,
        )
        values.append(
            SeriesValue(
                date=row.date,
                date_formatted=format_long_date(row.date),
                value=value,
                trend=Trend(current=value, previous=previous)
                if previous is not None
                else None,
            )
        )
        previous = value

    return Series(
        start_date=period.start_date,
        end_date=period.end_date,
        interval=interval,
        values=tuple(values),
    )


__all__ = ["compute_net_worth_summary", "build_net_worth_series"]
