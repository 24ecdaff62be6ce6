"""Tests for the composition root."""

from unittest.mock import MagicMock

from networth_forecast.application.use_cases.get_forecast import (
    GetForecastUseCase,
)
from networth_forecast.application.use_cases.manage_future_events import (
    ManageFutureEventsUseCase,
)
from networth_forecast.infrastructure import container
from networth_forecast.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from networth_forecast.infrastructure.future_events_repository import (
    SqlAlchemyFutureEventsRepository,
)


def test_builders_wire_sqlalchemy_repositories(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    db_port = MagicMock()

    assert isinstance(
        container.build_finance_repository(db_port),
        SqlAlchemyFinanceRepository,
    )
    assert isinstance(
        container.build_future_events_repository(db_port),
        SqlAlchemyFutureEventsRepository,
    )
    assert isinstance(
        container.build_get_forecast_use_case(db_port),
        GetForecastUseCase,
    )
    assert isinstance(
        container.build_manage_future_events_use_case(db_port),
        ManageFutureEventsUseCase,
    )


def test_forecast_use_case_reads_series_from_finance_repository(
    monkeypatch,
) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_get_forecast_use_case(MagicMock())

    assert use_case._series_provider is use_case._finance_repository


def test_default_database_adapter_is_used(monkeypatch) -> None:
    adapter = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: adapter)

    repository = container.build_finance_repository()

    assert repository._db_port is adapter
