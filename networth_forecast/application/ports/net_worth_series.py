"""Port for historical net worth series."""

from typing import Protocol

from networth_forecast.domain.models import Family, Period, Series


class NetWorthSeriesPort(Protocol):
    """Port building dated net worth snapshots for a family."""

    def fetch_net_worth_series(
        self,
        family: Family,
        period: Period,
        interval: str,
    ) -> Series:
        """Return net worth points in the family currency."""


__all__ = ["NetWorthSeriesPort"]
