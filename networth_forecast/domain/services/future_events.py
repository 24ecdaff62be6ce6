"""Validation rules for future events."""

from collections.abc import Iterable
from datetime import date

from networth_forecast.domain.constants import (
    CLASSIFICATIONS,
    MAX_EVENT_DESCRIPTION_LENGTH,
    MAX_EVENT_NAME_LENGTH,
)
from networth_forecast.domain.models import FutureEvent


ValidationErrors = dict[str, list[str]]


def validate_future_event(
    event: FutureEvent,
    *,
    today: date,
    existing: Iterable[FutureEvent] = (),
) -> ValidationErrors:
    """Collect per-field validation errors for a future event.

    The date rule is checked against ``today`` only here, at creation or
    update time; stored events that have since become past are not
    revisited.

    Args:
        event: Event to validate.
        today: Reference day for the future-date rule.
        existing: Other events of the same family, for uniqueness.

    Returns:
        ValidationErrors: Messages keyed by field, empty when valid.
    """
    errors: ValidationErrors = {}

    def add(field: str, message: str) -> None:
        errors.setdefault(field, []).append(message)

    name = (event.name or "").strip()
    if not name:
        add("name", "can't be blank")
    elif len(name) > MAX_EVENT_NAME_LENGTH:
        add(
            "name",
            f"is too long (maximum is {MAX_EVENT_NAME_LENGTH} characters)",
        )

    if event.date is None:
        add("date", "can't be blank")
    elif event.date <= today:
        add("date", "must be in the future")

    if event.amount is None:
        add("amount", "can't be blank")
    elif event.amount == 0:
        add("amount", "must be other than 0")

    if event.classification not in CLASSIFICATIONS:
        add("classification", "is not included in the list")

    if (
        event.description
        and len(event.description) > MAX_EVENT_DESCRIPTION_LENGTH
    ):
        add(
            "description",
            "is too long "
            f"(maximum is {MAX_EVENT_DESCRIPTION_LENGTH} characters)",
        )

    if not errors and is_duplicate_event(event, existing):
        add("name", "event already exists for this date and amount")

    return errors


def is_duplicate_event(
    event: FutureEvent,
    existing: Iterable[FutureEvent],
) -> bool:
    """Return True when another event shares the event's identity fields."""
    key = event.identity_key()
    return any(
        other.identity_key() == key
        for other in existing
        if other.id is None or other.id != event.id
    )


__all__ = ["ValidationErrors", "validate_future_event", "is_duplicate_event"]
