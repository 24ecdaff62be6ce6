"""Use case for creating, updating and deleting future events."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from networth_forecast.application.ports.future_events_repository import (
    FutureEventsRepositoryPort,
)
from networth_forecast.domain.models import FutureEvent
from networth_forecast.domain.services import (
    ValidationErrors,
    validate_future_event,
)
from networth_forecast.infrastructure.logging.logger import get_app_logger
from networth_forecast.utils.decimal_utils import coerce_decimal


class FutureEventNotFoundError(LookupError):
    """Raised when an event does not exist for the family."""


@dataclass(frozen=True)
class FutureEventResult:
    """Outcome of a create or update.

    Attributes:
        event: Stored event, or the rejected candidate when invalid.
        errors: Validation messages keyed by field; empty on success.
    """

    event: FutureEvent
    errors: ValidationErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def full_messages(self) -> list[str]:
        """Return ``"<Field> <message>"`` strings for display."""
        return [
            f"{name.replace('_', ' ').capitalize()} {message}"
            for name, messages in self.errors.items()
            for message in messages
        ]


class ManageFutureEventsUseCase:
    """Run the future event lifecycle with per-field validation."""

    def __init__(
        self,
        repository: FutureEventsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing future events.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def list(self, family_id: str) -> list[FutureEvent]:
        """Return the family's events ordered by date and name."""
        return self._repository.list_for_family(family_id)

    def create(
        self,
        family_id: str,
        *,
        name: str,
        date,
        amount,
        classification: str,
        description: str | None = None,
        today: date | None = None,
    ) -> FutureEventResult:
        """Validate and store a new event.

        Args:
            family_id: Owning family.
            name: Event label.
            date: Event date, as a date or ISO string.
            amount: Non-zero amount, as a number or numeric string.
            classification: ``income`` or ``expense``.
            description: Optional free text.
            today: Reference day for the future-date rule.

        Returns:
            FutureEventResult: Stored event, or the candidate and its errors.
        """
        parse_errors: ValidationErrors = {}
        candidate = FutureEvent(
            family_id=family_id,
            name=name,
            date=_parse_date(date, parse_errors),
            amount=_parse_amount(amount, parse_errors),
            classification=classification,
            description=description,
        )
        return self._save(candidate, parse_errors, today, is_new=True)

    def update(
        self,
        family_id: str,
        event_id: str,
        *,
        today: date | None = None,
        **changes,
    ) -> FutureEventResult:
        """Apply changes to an event and re-run every validation.

        Raises:
            FutureEventNotFoundError: If the event does not exist.
        """
        current = self._get_or_raise(family_id, event_id)
        parse_errors: ValidationErrors = {}
        if "date" in changes:
            changes["date"] = _parse_date(changes["date"], parse_errors)
        if "amount" in changes:
            changes["amount"] = _parse_amount(changes["amount"], parse_errors)
        allowed = {"name", "date", "amount", "classification", "description"}
        unknown = set(changes) - allowed
        if unknown:
            raise TypeError(f"Unknown future event fields: {sorted(unknown)}")
        candidate = replace(current, **changes)
        return self._save(candidate, parse_errors, today, is_new=False)

    def delete(self, family_id: str, event_id: str) -> None:
        """Delete an event.

        Raises:
            FutureEventNotFoundError: If the event does not exist.
        """
        self._get_or_raise(family_id, event_id)
        self._repository.delete(family_id, event_id)
        self._logger.info(
            f"Future event deleted: family={family_id}, id={event_id}"
        )

    def _save(
        self,
        candidate: FutureEvent,
        parse_errors: ValidationErrors,
        today: date | None,
        is_new: bool,
    ) -> FutureEventResult:
        if parse_errors:
            return FutureEventResult(event=candidate, errors=parse_errors)
        errors = validate_future_event(
            candidate,
            today=today or date.today(),
            existing=self._repository.list_for_family(candidate.family_id),
        )
        if errors:
            self._logger.info(
                f"Future event rejected for family={candidate.family_id}: "
                f"{errors}"
            )
            return FutureEventResult(event=candidate, errors=errors)
        saved = (
            self._repository.add(candidate)
            if is_new
            else self._repository.update(candidate)
        )
        self._logger.info(
            f"Future event {'created' if is_new else 'updated'}: "
            f"family={saved.family_id}, id={saved.id}, date={saved.date}"
        )
        return FutureEventResult(event=saved)

    def _get_or_raise(self, family_id: str, event_id: str) -> FutureEvent:
        event = self._repository.get(family_id, event_id)
        if event is None:
            raise FutureEventNotFoundError(
                f"Future event {event_id} not found for family {family_id}"
            )
        return event


def _parse_date(value, errors: ValidationErrors) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        errors.setdefault("date", []).append("is not a valid date")
        return None


def _parse_amount(value, errors: ValidationErrors) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        amount = coerce_decimal(value)
    except InvalidOperation:
        errors.setdefault("amount", []).append("is not a number")
        return None
    if not amount.is_finite():
        errors.setdefault("amount", []).append("is not a number")
        return None
    return amount


__all__ = [
    "ManageFutureEventsUseCase",
    "FutureEventResult",
    "FutureEventNotFoundError",
]
