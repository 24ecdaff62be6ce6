"""Declared one-time future income or expense."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from networth_forecast.domain.constants import EXPENSE, INCOME
from networth_forecast.domain.models.money import Money


@dataclass(frozen=True)
class FutureEvent:
    """Future event owned by a family.

    Attributes:
        id: Storage identifier, None until persisted.
        family_id: Owning family.
        name: Short label shown to the user.
        date: Day the event is expected.
        amount: Non-zero amount in the family currency.
        classification: ``income`` or ``expense``.
        description: Optional free text.
    """

    family_id: str
    name: str
    date: date
    amount: Decimal
    classification: str
    description: str | None = None
    id: str | None = None

    @property
    def is_income(self) -> bool:
        return self.classification == INCOME

    @property
    def is_expense(self) -> bool:
        return self.classification == EXPENSE

    def amount_money(self, currency: str) -> Money:
        return Money(self.amount, currency)

    def impact_on_net_worth(self, currency: str) -> Money:
        """Signed effect on net worth: income adds, expense subtracts."""
        money = self.amount_money(currency)
        return money if self.is_income else -money

    def identity_key(self) -> tuple[str, str, date, Decimal, str]:
        """Fields that must be unique across a family's events."""
        return (
            self.family_id,
            self.name,
            self.date,
            self.amount,
            self.classification,
        )


__all__ = ["FutureEvent"]
