"""Exchange-rate lookups for converting amounts into a target currency."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from networth_forecast.domain.models import ExchangeRateRow
from networth_forecast.utils.decimal_utils import coerce_decimal


RateMap = dict[tuple[date, str], Decimal]


def build_rate_map(
    rates: Iterable[ExchangeRateRow],
    target_currency: str,
) -> RateMap:
    """Index exchange rates into the target currency by day and currency.

    Args:
        rates: Exchange rate rows from the repository.
        target_currency: Currency amounts are converted into.

    Returns:
        RateMap: Rate keyed by (date, from_currency). Later rows for the same
        key replace earlier ones.
    """
    rate_map: RateMap = {}
    for row in rates:
        if row.to_currency != target_currency:
            continue
        rate_map[(row.date, row.from_currency)] = coerce_decimal(row.rate)
    return rate_map


def resolve_rate(
    rate_map: RateMap,
    on_date: date,
    currency: str,
) -> Decimal:
    """Return the rate for a day and currency, defaulting to 1.

    A missing rate and a zero rate both fall back to 1.
    """
    rate = rate_map.get((on_date, currency))
    if not rate:
        return Decimal("1")
    return rate


__all__ = ["RateMap", "build_rate_map", "resolve_rate"]
