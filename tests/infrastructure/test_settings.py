"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from networth_forecast.infrastructure import settings as settings_module
from networth_forecast.infrastructure.settings import ForecastSettings


def _isolate(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "FORECAST_FAMILY_ID",
        "FORECAST_DEFAULT_TIMELINE",
        "FORECAST_CACHE_TTL",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_defaults(monkeypatch) -> None:
    """Unset variables should yield the defaults."""
    _isolate(monkeypatch)

    settings = ForecastSettings.from_env()

    assert settings == ForecastSettings(
        family_id=None,
        default_timeline="1Y",
        cache_ttl_seconds=300,
    )


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured variables should be normalized."""
    _isolate(monkeypatch)
    monkeypatch.setenv("FORECAST_FAMILY_ID", " fam-1 ")
    monkeypatch.setenv("FORECAST_DEFAULT_TIMELINE", "5y")
    monkeypatch.setenv("FORECAST_CACHE_TTL", "60")

    settings = ForecastSettings.from_env()

    assert settings.family_id == "fam-1"
    assert settings.default_timeline == "5Y"
    assert settings.cache_ttl_seconds == 60


def test_from_env_warns_on_invalid_values(monkeypatch) -> None:
    """Invalid timeline or TTL should fall back with a warning."""
    logger = _isolate(monkeypatch)
    monkeypatch.setenv("FORECAST_DEFAULT_TIMELINE", "10Y")
    monkeypatch.setenv("FORECAST_CACHE_TTL", "soon")

    settings = ForecastSettings.from_env()

    assert settings.default_timeline == "1Y"
    assert settings.cache_ttl_seconds == 300
    assert logger.warning.call_count == 2
