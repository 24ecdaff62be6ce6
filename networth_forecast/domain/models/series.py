"""Dated series and period windows."""

from dataclasses import dataclass, field
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from networth_forecast.domain.models.money import Money
from networth_forecast.domain.models.trend import Trend
from networth_forecast.utils.date_utils import (
    beginning_of_month,
    end_of_month,
    truncate_date,
)


@dataclass(frozen=True)
class Period:
    """Inclusive date window."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise ValueError(
                f"Period start {self.start_date} is after end {self.end_date}"
            )

    @classmethod
    def custom(cls, start_date: date, end_date: date) -> "Period":
        return cls(start_date=start_date, end_date=end_date)

    @classmethod
    def last_30_days(cls, as_of: date) -> "Period":
        return cls(start_date=as_of - timedelta(days=30), end_date=as_of)

    @classmethod
    def trailing_years(cls, as_of: date, years: int) -> "Period":
        """Whole months from ``years`` years ago through the current month."""
        return cls(
            start_date=beginning_of_month(as_of - relativedelta(years=years)),
            end_date=end_of_month(as_of),
        )

    def contains(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date


@dataclass(frozen=True)
class SeriesValue:
    """Single dated point of a series."""

    date: date
    date_formatted: str
    value: Money
    trend: Trend | None = None


@dataclass(frozen=True)
class Series:
    """Ordered dated values with interval metadata.

    Attributes:
        start_date: First date covered by the series.
        end_date: Last date covered by the series.
        interval: Bucket size of the points (e.g. ``month``).
        values: Points in strictly ascending date order, at most one per
            interval bucket.
    """

    start_date: date
    end_date: date
    interval: str
    values: tuple[SeriesValue, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        for previous, current in zip(self.values, self.values[1:]):
            if current.date <= previous.date:
                raise ValueError(
                    "Series values must have strictly ascending dates: "
                    f"{previous.date} then {current.date}"
                )
            if truncate_date(current.date, self.interval) == truncate_date(
                previous.date,
                self.interval,
            ):
                raise ValueError(
                    f"Series values share a {self.interval} bucket: "
                    f"{previous.date} and {current.date}"
                )

    @property
    def is_empty(self) -> bool:
        return not self.values

    @property
    def last(self) -> SeriesValue | None:
        return self.values[-1] if self.values else None

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["Period", "SeriesValue", "Series"]
