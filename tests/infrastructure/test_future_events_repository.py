"""Tests for the SQLAlchemy future events repository."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from networth_forecast.domain.models import FutureEvent
from networth_forecast.infrastructure.future_events_repository import (
    SqlAlchemyFutureEventsRepository,
)


def _build_db_port(rows=None, rowcount: int = 1) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    for method in ("connect", "begin"):
        context = MagicMock()
        context.__enter__.return_value = conn
        getattr(engine, method).return_value = context
    result = MagicMock()
    result.all.return_value = rows or []
    result.rowcount = rowcount
    conn.execute.return_value = result

    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    return db_port


def _conn(db_port: MagicMock) -> MagicMock:
    engine = db_port.get_engine.return_value
    return engine.connect.return_value.__enter__.return_value


def _event(**overrides) -> FutureEvent:
    values = dict(
        family_id="fam",
        name="Bonus",
        date=date(2024, 12, 15),
        amount=Decimal("2000"),
        classification="income",
    )
    values.update(overrides)
    return FutureEvent(**values)


def test_list_between_maps_rows_to_events() -> None:
    rows = [
        SimpleNamespace(
            id="evt-1",
            family_id="fam",
            name="Bonus",
            date=date(2024, 12, 15),
            amount="2000.0000",
            event_type="income",
            description=None,
        )
    ]
    db_port = _build_db_port(rows)
    repository = SqlAlchemyFutureEventsRepository(db_port)

    events = repository.list_between("fam", date(2024, 6, 1), date(2025, 5, 31))

    assert events == [_event(id="evt-1", amount=Decimal("2000.0000"))]
    _, params = _conn(db_port).execute.call_args.args
    assert params == {
        "family_id": "fam",
        "start_date": date(2024, 6, 1),
        "end_date": date(2025, 5, 31),
    }


def test_get_returns_none_when_missing() -> None:
    repository = SqlAlchemyFutureEventsRepository(_build_db_port([]))

    assert repository.get("fam", "missing") is None


def test_add_assigns_identifier_inside_transaction() -> None:
    db_port = _build_db_port()
    repository = SqlAlchemyFutureEventsRepository(db_port)

    stored = repository.add(_event())

    assert stored.id
    engine = db_port.get_engine.return_value
    engine.begin.assert_called_once()
    _, params = _conn(db_port).execute.call_args.args
    assert params["id"] == stored.id
    assert params["event_type"] == "income"


def test_update_requires_identifier() -> None:
    repository = SqlAlchemyFutureEventsRepository(_build_db_port())

    with pytest.raises(ValueError):
        repository.update(_event())


def test_delete_reports_affected_rows() -> None:
    assert SqlAlchemyFutureEventsRepository(
        _build_db_port(rowcount=1)
    ).delete("fam", "evt-1") is True
    assert SqlAlchemyFutureEventsRepository(
        _build_db_port(rowcount=0)
    ).delete("fam", "evt-1") is False
