"""
Values -- Immutable, self-validating value objects for contract evaluation.

Responsibility:
    Provides the value types that contract terms and payments are built
    from: Amount, Currency, Direction and Payment.

Architecture position:
    Domain -- pure functional core, zero I/O.
    Imported by finance_contracts.domain.contract and the evaluator.

Invariants enforced:
    - An Amount is always a finite Decimal (never NaN, never infinite).
    - A Payment is never mutated; scaling and inversion return new Payments.

Failure modes:
    - InvalidAmountError on construction with a non-finite or unparseable
      value, or when scaling overflows the decimal context.

Non-goals:
    - No precision or rounding policy on amounts.
    - No currency conversion; Currency is purely a tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from enum import Enum, unique

from finance_contracts.exceptions import InvalidAmountError


@unique
class Currency(str, Enum):
    """Closed set of currencies a contract may pay in."""

    EUR = "EUR"
    GBP = "GBP"
    USD = "USD"

    def __str__(self) -> str:
        return self.value


@unique
class Direction(str, Enum):
    """Polarity of a payment: Long receives, Short pays."""

    LONG = "Long"
    SHORT = "Short"

    def inverted(self) -> Direction:
        return Direction.SHORT if self is Direction.LONG else Direction.LONG

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Amount:
    """
    Finite numeric quantity value object.

    Contract:
        Wraps a Decimal. Non-Decimal inputs are converted through their
        string form, so floats keep their shortest repr and never pick up
        binary noise.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - value is always a finite Decimal
        - Carries no unit; currency is tracked by the Payment

    Non-goals:
        - Does NOT round or quantize
    """

    value: Decimal

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, Decimal):
            try:
                value = Decimal(str(value))
            except (InvalidOperation, ValueError) as e:
                raise InvalidAmountError(self.value) from e
            object.__setattr__(self, "value", value)

        if not value.is_finite():
            raise InvalidAmountError(value)

    @property
    def is_zero(self) -> bool:
        """True for both 0 and -0."""
        return self.value.is_zero()

    @property
    def is_one(self) -> bool:
        return self.value == 1

    def __mul__(self, other: Amount) -> Amount:
        """Multiply two amounts exactly. The product must itself be finite."""
        if not isinstance(other, Amount):
            return NotImplemented
        digits = len(self.value.as_tuple().digits) + len(other.value.as_tuple().digits)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits)
            ctx.traps[InvalidOperation] = True
            ctx.traps[Overflow] = True
            try:
                product = self.value * other.value
            except (InvalidOperation, Overflow) as e:
                raise InvalidAmountError(f"{self.value} * {other.value}") from e
        return Amount(product)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Amount({self.value!r})"


def make_amount(n: Decimal | int | str | float) -> Amount:
    """
    Validate ``n`` as a finite quantity.

    Raises:
        InvalidAmountError: If ``n`` is NaN, infinite or not a number.
    """
    return Amount(n)


# Multiplicative identity, the amount paid by a unit contract.
UNIT = Amount(Decimal("1"))


@dataclass(frozen=True, slots=True)
class Payment:
    """
    One concrete cash flow produced by evaluating a contract.

    Guarantees:
        - Immutable and hashable
        - scaled() and inverted() return new Payments
    """

    direction: Direction
    amount: Amount
    currency: Currency

    def scaled(self, factor: Amount) -> Payment:
        """Multiply the amount by ``factor``; direction and currency are kept."""
        return Payment(self.direction, factor * self.amount, self.currency)

    def inverted(self) -> Payment:
        """Swap Long and Short; amount and currency are kept."""
        return Payment(self.direction.inverted(), self.amount, self.currency)

    def __str__(self) -> str:
        return f"{self.direction} {self.amount} {self.currency}"
