"""Tests for the Money value object."""

from decimal import Decimal

import pytest

from networth_forecast.domain.models import CurrencyMismatchError, Money


def test_money_coerces_amount_to_decimal() -> None:
    money = Money(12.5, "EUR")

    assert money.amount == Decimal("12.5")
    assert isinstance(money.amount, Decimal)


def test_money_arithmetic_keeps_currency() -> None:
    total = Money(Decimal("10"), "EUR") + Money(Decimal("2.50"), "EUR")
    diff = total - Money(Decimal("5"), "EUR")

    assert total == Money(Decimal("12.50"), "EUR")
    assert diff == Money(Decimal("7.50"), "EUR")
    assert Money(Decimal("3"), "EUR") * 2 == Money(Decimal("6"), "EUR")
    assert 2 * Money(Decimal("3"), "EUR") == Money(Decimal("6"), "EUR")
    assert Money(Decimal("9"), "EUR") / 3 == Money(Decimal("3"), "EUR")
    assert -Money(Decimal("4"), "EUR") == Money(Decimal("-4"), "EUR")
    assert abs(Money(Decimal("-4"), "EUR")) == Money(Decimal("4"), "EUR")


def test_money_rejects_mixed_currencies() -> None:
    with pytest.raises(CurrencyMismatchError):
        Money(Decimal("1"), "EUR") + Money(Decimal("1"), "USD")
    with pytest.raises(CurrencyMismatchError):
        Money(Decimal("1"), "EUR") < Money(Decimal("2"), "USD")


def test_money_rejects_plain_numbers_in_addition() -> None:
    with pytest.raises(TypeError):
        Money(Decimal("1"), "EUR") + Decimal("1")


def test_money_ordering_and_helpers() -> None:
    small = Money(Decimal("1"), "EUR")
    large = Money(Decimal("2"), "EUR")

    assert small < large
    assert large >= small
    assert Money.zero("EUR").is_zero()
    assert large.to_decimal() == Decimal("2")
    assert Money(Decimal("1234.5"), "EUR").format() == "1,234.50 EUR"
