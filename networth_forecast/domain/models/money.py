"""Currency-qualified amounts."""

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering

from networth_forecast.utils.decimal_utils import coerce_decimal


class CurrencyMismatchError(ValueError):
    """Raised when combining amounts expressed in different currencies."""


@total_ordering
@dataclass(frozen=True)
class Money:
    """Decimal amount tied to a currency code.

    Amounts only add to, subtract from, and compare with amounts of the same
    currency. Scaling is done with plain numbers. There is no implicit float
    conversion: presentation code reads ``amount`` explicitly.

    Attributes:
        amount: Signed amount.
        currency: ISO currency code (e.g. EUR).
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", coerce_decimal(self.amount))

    @classmethod
    def zero(cls, currency: str) -> "Money":
        """Return a zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    def _check_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(
                f"Expected Money, got {type(other).__name__}"
            )
        if other.currency != self.currency:
            raise CurrencyMismatchError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor) -> "Money":
        if isinstance(factor, Money):
            return NotImplemented
        return Money(self.amount * coerce_decimal(factor), self.currency)

    __rmul__ = __mul__

    def __truediv__(self, divisor) -> "Money":
        if isinstance(divisor, Money):
            return NotImplemented
        return Money(self.amount / coerce_decimal(divisor), self.currency)

    def __neg__(self) -> "Money":
        return Money(-self.amount, self.currency)

    def __abs__(self) -> "Money":
        return Money(abs(self.amount), self.currency)

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        """Return True when the amount is zero."""
        return self.amount == 0

    def to_decimal(self) -> Decimal:
        """Return the plain amount for presentation boundaries."""
        return self.amount

    def format(self) -> str:
        """Format the amount with two decimals and the currency code."""
        return f"{self.amount:,.2f} {self.currency}"


__all__ = ["Money", "CurrencyMismatchError"]
