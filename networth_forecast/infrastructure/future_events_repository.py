"""SQLAlchemy-backed repository for future events."""

from dataclasses import replace
from datetime import date
import uuid

from sqlalchemy import text

from networth_forecast.application.ports.database import DatabaseEnginePort
from networth_forecast.application.ports.future_events_repository import (
    FutureEventsRepositoryPort,
)
from networth_forecast.domain.models import FutureEvent
from networth_forecast.utils.decimal_utils import coerce_decimal

_SELECT_COLUMNS = """
SELECT id, family_id, name, date, amount, event_type, description
FROM future_events
"""


class SqlAlchemyFutureEventsRepository(FutureEventsRepositoryPort):
    """Repository storing future events in the ``future_events`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def list_for_family(self, family_id: str) -> list[FutureEvent]:
        query = text(
            _SELECT_COLUMNS
            + " WHERE family_id = :family_id ORDER BY date, name"
        )
        return self._fetch(query, {"family_id": family_id})

    def list_between(
        self,
        family_id: str,
        start_date: date,
        end_date: date,
    ) -> list[FutureEvent]:
        query = text(
            _SELECT_COLUMNS
            + """
            WHERE family_id = :family_id
              AND date >= :start_date
              AND date <= :end_date
            ORDER BY date, name
            """
        )
        return self._fetch(
            query,
            {
                "family_id": family_id,
                "start_date": start_date,
                "end_date": end_date,
            },
        )

    def get(self, family_id: str, event_id: str) -> FutureEvent | None:
        query = text(
            _SELECT_COLUMNS
            + " WHERE family_id = :family_id AND id = :event_id LIMIT 1"
        )
        events = self._fetch(
            query,
            {"family_id": family_id, "event_id": event_id},
        )
        return events[0] if events else None

    def add(self, event: FutureEvent) -> FutureEvent:
        stored = replace(event, id=event.id or str(uuid.uuid4()))
        query = text(
            """
            INSERT INTO future_events (
                id, family_id, name, date, amount, event_type, description,
                created_at, updated_at
            )
            VALUES (
                :id, :family_id, :name, :date, :amount, :event_type,
                :description, NOW(), NOW()
            )
            """
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(query, self._to_params(stored))
        return stored

    def update(self, event: FutureEvent) -> FutureEvent:
        if event.id is None:
            raise ValueError("Cannot update a future event without an id")
        query = text(
            """
            UPDATE future_events
            SET name = :name,
                date = :date,
                amount = :amount,
                event_type = :event_type,
                description = :description,
                updated_at = NOW()
            WHERE id = :id AND family_id = :family_id
            """
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(query, self._to_params(event))
        return event

    def delete(self, family_id: str, event_id: str) -> bool:
        query = text(
            """
            DELETE FROM future_events
            WHERE id = :event_id AND family_id = :family_id
            """
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                query,
                {"family_id": family_id, "event_id": event_id},
            )
        return bool(result.rowcount)

    def _fetch(self, query, params: dict) -> list[FutureEvent]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            FutureEvent(
                id=str(row.id),
                family_id=str(row.family_id),
                name=row.name,
                date=row.date,
                amount=coerce_decimal(row.amount),
                classification=row.event_type,
                description=row.description,
            )
            for row in rows
        ]

    @staticmethod
    def _to_params(event: FutureEvent) -> dict:
        return {
            "id": event.id,
            "family_id": event.family_id,
            "name": event.name,
            "date": event.date,
            "amount": event.amount,
            "event_type": event.classification,
            "description": event.description,
        }


__all__ = ["SqlAlchemyFutureEventsRepository"]
