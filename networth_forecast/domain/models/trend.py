"""Two-point comparison of a scalar metric."""

from decimal import Decimal

from networth_forecast.domain.models.money import Money
from networth_forecast.utils.decimal_utils import (
    coerce_decimal,
    round_one_decimal,
)


DIRECTIONS = ("up", "down")


def _to_number(value) -> Decimal:
    if isinstance(value, Money):
        return value.amount
    return coerce_decimal(value)


class Trend:
    """Compare a current value with a previous one.

    Money and plain numbers are both accepted; comparisons and deltas run on
    their Decimal amounts. ``favorable_direction`` only decides whether a
    move is good news; it never changes the numbers.
    """

    def __init__(self, current, previous=None, favorable_direction=None):
        if current is None:
            raise ValueError("Trend current value is required")
        self.current = current
        self.previous = previous if previous is not None else Decimal("0")
        self.favorable_direction = (
            favorable_direction
            if favorable_direction in DIRECTIONS
            else "up"
        )

    @property
    def direction(self) -> str:
        current = _to_number(self.current)
        previous = _to_number(self.previous)
        if current == previous:
            return "flat"
        if current > previous:
            return "up"
        return "down"

    @property
    def value(self) -> Decimal:
        """Raw delta between current and previous."""
        return _to_number(self.current) - _to_number(self.previous)

    @property
    def percent(self) -> Decimal:
        """Percent change, rounded to one decimal.

        Returns 0.0 when both sides are zero and a signed infinity when only
        the previous value is zero.
        """
        current = _to_number(self.current)
        previous = _to_number(self.previous)
        if previous == 0 and current == 0:
            return Decimal("0.0")
        if previous == 0:
            return Decimal("Infinity") if current > 0 else Decimal("-Infinity")
        change = (current - previous) / previous * Decimal("100")
        return round_one_decimal(change)

    @property
    def percent_formatted(self) -> str:
        percent = self.percent
        if percent.is_finite():
            return f"{percent}%"
        return "+∞" if percent > 0 else "-∞"

    @property
    def is_favorable(self) -> bool | None:
        """Whether the move goes the favorable way; None when flat."""
        direction = self.direction
        if direction == "flat":
            return None
        return direction == self.favorable_direction

    def as_dict(self) -> dict[str, object]:
        """Serialize the trend for presentation layers."""
        return {
            "value": self.value,
            "percent": self.percent,
            "percent_formatted": self.percent_formatted,
            "direction": self.direction,
            "favorable_direction": self.favorable_direction,
            "current": self.current,
            "previous": self.previous,
        }

    def __repr__(self) -> str:
        return (
            f"Trend(current={self.current!r}, previous={self.previous!r}, "
            f"favorable_direction={self.favorable_direction!r})"
        )


__all__ = ["Trend", "DIRECTIONS"]
