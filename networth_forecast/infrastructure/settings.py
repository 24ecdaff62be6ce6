"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from networth_forecast.domain.constants import DEFAULT_TIMELINE, TIMELINE_MONTHS
from networth_forecast.infrastructure.logging.logger import get_app_logger

DEFAULT_CACHE_TTL_SECONDS = 300


@dataclass(frozen=True)
class ForecastSettings:
    """Settings for the forecast adapters.

    Attributes:
        family_id: Family shown when no other is selected.
        default_timeline: Timeline preselected in the dashboard.
        cache_ttl_seconds: How long dashboard reads are cached.
    """

    family_id: Optional[str] = None
    default_timeline: str = DEFAULT_TIMELINE
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS

    @classmethod
    def from_env(cls) -> "ForecastSettings":
        """Build settings from environment variables.

        Returns:
            ForecastSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        family_id = os.getenv("FORECAST_FAMILY_ID", "").strip() or None
        timeline = cls._normalize_timeline(
            os.getenv("FORECAST_DEFAULT_TIMELINE", DEFAULT_TIMELINE),
            logger=logger,
        )
        ttl = cls._parse_ttl(os.getenv("FORECAST_CACHE_TTL"), logger=logger)
        return cls(
            family_id=family_id,
            default_timeline=timeline,
            cache_ttl_seconds=ttl,
        )

    @staticmethod
    def _normalize_timeline(raw: str, logger) -> str:
        """Return a known timeline key, warning on unknown values."""
        timeline = raw.strip().upper()
        if timeline not in TIMELINE_MONTHS:
            logger.warning(
                f"Unknown FORECAST_DEFAULT_TIMELINE={raw!r}, "
                f"using {DEFAULT_TIMELINE}"
            )
            return DEFAULT_TIMELINE
        return timeline

    @staticmethod
    def _parse_ttl(raw: Optional[str], logger) -> int:
        """Parse the cache TTL, falling back to the default when invalid."""
        if raw is None or not raw.strip():
            return DEFAULT_CACHE_TTL_SECONDS
        try:
            ttl = int(raw)
        except ValueError:
            logger.warning(
                f"Invalid FORECAST_CACHE_TTL={raw!r}, "
                f"using {DEFAULT_CACHE_TTL_SECONDS}"
            )
            return DEFAULT_CACHE_TTL_SECONDS
        return max(ttl, 0)


__all__ = ["ForecastSettings", "DEFAULT_CACHE_TTL_SECONDS"]
