"""Helpers for Decimal normalization."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext


ONE_DECIMAL = Decimal("0.1")
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_lenient_decimal(value) -> Decimal:
    """Parse free-form numeric input, keeping only its leading number.

    ``"12.5%"`` becomes 12.5 and unparseable or non-finite input becomes 0.

    Args:
        value: Raw text or number from a form field or environment variable.

    Returns:
        Decimal: Parsed value, or zero when nothing numeric is found.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        try:
            parsed = coerce_decimal(value)
        except InvalidOperation:
            return Decimal("0")
        return parsed if parsed.is_finite() else Decimal("0")
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return Decimal("0")
    return Decimal(match.group(0).strip())


def round_one_decimal(value: Decimal) -> Decimal:
    """Round half away from zero to one decimal place.

    The context precision is widened to the integer digits of ``value`` so
    large ratios round instead of raising ``InvalidOperation``.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


__all__ = [
    "ONE_DECIMAL",
    "coerce_decimal",
    "parse_lenient_decimal",
    "round_one_decimal",
]
