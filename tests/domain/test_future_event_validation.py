"""Tests for future event validation rules."""

from datetime import date
from decimal import Decimal

from networth_forecast.domain.models import FutureEvent, Money
from networth_forecast.domain.services import validate_future_event
from networth_forecast.domain.services.future_events import is_duplicate_event

TODAY = date(2024, 6, 1)


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


def test_valid_event_has_no_errors() -> None:
    assert validate_future_event(_event(), today=TODAY) == {}


def test_missing_fields_are_reported_per_field() -> None:
    errors = validate_future_event(
        _event(name=" ", date=None, amount=None, classification="gift"),
        today=TODAY,
    )

    assert errors == {
        "name": ["can't be blank"],
        "date": ["can't be blank"],
        "amount": ["can't be blank"],
        "classification": ["is not included in the list"],
    }


def test_date_must_be_after_today_and_amount_non_zero() -> None:
    errors = validate_future_event(
        _event(date=TODAY, amount=Decimal("0")),
        today=TODAY,
    )

    assert errors["date"] == ["must be in the future"]
    assert errors["amount"] == ["must be other than 0"]


def test_length_limits() -> None:
    errors = validate_future_event(
        _event(name="x" * 256, description="y" * 1001),
        today=TODAY,
    )

    assert errors["name"] == ["is too long (maximum is 255 characters)"]
    assert errors["description"] == [
        "is too long (maximum is 1000 characters)"
    ]
    assert validate_future_event(
        _event(name="x" * 255, description="y" * 1000),
        today=TODAY,
    ) == {}


def test_duplicates_are_rejected_but_not_against_self() -> None:
    stored = _event(id="evt-1")

    errors = validate_future_event(_event(), today=TODAY, existing=[stored])

    assert errors == {"name": ["event already exists for this date and amount"]}
    assert not is_duplicate_event(stored, [stored])
    assert not is_duplicate_event(_event(amount=Decimal("2001")), [stored])


def test_event_impact_sign_follows_classification() -> None:
    assert _event().impact_on_net_worth("EUR") == Money(Decimal("2000"), "EUR")
    assert _event(classification="expense").impact_on_net_worth(
        "EUR"
    ) == Money(Decimal("-2000"), "EUR")
