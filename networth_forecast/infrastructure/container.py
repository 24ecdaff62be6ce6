"""Composition root for wiring infrastructure adapters."""

from networth_forecast.application.ports.database import DatabaseEnginePort
from networth_forecast.application.use_cases.get_forecast import (
    GetForecastUseCase,
)
from networth_forecast.application.use_cases.manage_future_events import (
    ManageFutureEventsUseCase,
)
from networth_forecast.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from networth_forecast.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from networth_forecast.infrastructure.future_events_repository import (
    SqlAlchemyFutureEventsRepository,
)
from networth_forecast.infrastructure.logging.logger import get_app_logger


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyFinanceRepository:
    """Return the finance repository, which also serves net worth series."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db)


def build_future_events_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyFutureEventsRepository:
    """Return the future events repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFutureEventsRepository(resolved_db)


def build_get_forecast_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetForecastUseCase:
    """Return the forecast use case wired to SQLAlchemy repositories."""
    resolved_db = db_port or build_database_adapter()
    finance_repository = build_finance_repository(resolved_db)
    return GetForecastUseCase(
        finance_repository=finance_repository,
        series_provider=finance_repository,
        future_events_repository=build_future_events_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_manage_future_events_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ManageFutureEventsUseCase:
    """Return the future events use case."""
    return ManageFutureEventsUseCase(
        build_future_events_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_finance_repository",
    "build_future_events_repository",
    "build_get_forecast_use_case",
    "build_manage_future_events_use_case",
]
