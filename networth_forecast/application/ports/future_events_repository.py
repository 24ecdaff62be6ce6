"""Port for future event storage."""

from datetime import date
from typing import Protocol

from networth_forecast.domain.models import FutureEvent


class FutureEventsRepositoryPort(Protocol):
    """Port exposing read and write access to a family's future events."""

    def list_for_family(self, family_id: str) -> list[FutureEvent]:
        """Return every event of the family ordered by date and name."""

    def list_between(
        self,
        family_id: str,
        start_date: date,
        end_date: date,
    ) -> list[FutureEvent]:
        """Return events dated within the inclusive range, ordered by date."""

    def get(self, family_id: str, event_id: str) -> FutureEvent | None:
        """Return one event, or None when missing."""

    def add(self, event: FutureEvent) -> FutureEvent:
        """Persist a new event and return it with its identifier."""

    def update(self, event: FutureEvent) -> FutureEvent:
        """Persist changes to an existing event."""

    def delete(self, family_id: str, event_id: str) -> bool:
        """Delete an event, returning False when nothing was deleted."""


__all__ = ["FutureEventsRepositoryPort"]
