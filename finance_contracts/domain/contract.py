"""
Contract -- Closed grammar of contract terms and their smart constructors.

Responsibility:
    Defines the six contract variants and the only sanctioned way to build
    and combine them. Every term reachable through the constructors below
    is in normal form.

Architecture position:
    Domain -- pure functional core, zero I/O.
    Consumed by finance_contracts.domain.evaluator and the serializer.

Invariants enforced:
    - multiple() with a zero amount (0 or -0) collapses to Zero.
    - multiple() with amount 1 returns the inner contract unchanged.
    - multiple(), later() and give() over Zero collapse to Zero.
    - and_() absorbs Zero children; it is otherwise left unflattened.
    - Terms are frozen; constructors never mutate their arguments.

Failure modes:
    None. The constructors are total over valid inputs and do not
    validate amounts (use make_amount for that).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from finance_contracts.domain.values import Amount, Currency


@dataclass(frozen=True, slots=True)
class Zero:
    """No obligation."""


@dataclass(frozen=True, slots=True)
class One:
    """Obligation to receive one unit of ``currency``."""

    currency: Currency


@dataclass(frozen=True, slots=True)
class Multiple:
    """Scale every payment of ``contract`` by ``amount``."""

    amount: Amount
    contract: Contract


@dataclass(frozen=True, slots=True)
class Later:
    """``contract`` is inert before ``date`` and active at or after it."""

    date: date
    contract: Contract


@dataclass(frozen=True, slots=True)
class Give:
    """Invert the direction of every payment of ``contract``."""

    contract: Contract


@dataclass(frozen=True, slots=True)
class And:
    """Hold both sub-contracts at once."""

    contract_a: Contract
    contract_b: Contract


Contract = Zero | One | Multiple | Later | Give | And

CONTRACT_TYPES: tuple[type, ...] = (Zero, One, Multiple, Later, Give, And)


# ---------------------------------------------------------------------------
# Smart constructors
# ---------------------------------------------------------------------------


def is_zero(contract: Contract) -> bool:
    return isinstance(contract, Zero)


def zero() -> Contract:
    return Zero()


def one(currency: Currency) -> Contract:
    return One(currency)


def multiple(amount: Amount, contract: Contract) -> Contract:
    """Scale ``contract`` by an already validated ``amount``."""
    if is_zero(contract) or amount.is_zero:
        return zero()
    if amount.is_one:
        return contract
    return Multiple(amount, contract)


def later(when: date, contract: Contract) -> Contract:
    if is_zero(contract):
        return zero()
    return Later(when, contract)


def give(contract: Contract) -> Contract:
    if is_zero(contract):
        return zero()
    return Give(contract)


def and_(contract_a: Contract, contract_b: Contract) -> Contract:
    """
    Hold both contracts at once.

    A Zero on either side is absorbed; two Zeros give Zero. No further
    reassociation or flattening takes place.
    """
    if is_zero(contract_a):
        return contract_b
    if is_zero(contract_b):
        return contract_a
    return And(contract_a, contract_b)


def zcb(when: date, amount: Amount, currency: Currency) -> Contract:
    """Zero-coupon bond: receive ``amount`` of ``currency`` at ``when``."""
    return later(when, multiple(amount, one(currency)))


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------


def contract_size(contract: Contract) -> int:
    """Number of nodes in the term."""
    if isinstance(contract, (Multiple, Later, Give)):
        return 1 + contract_size(contract.contract)
    if isinstance(contract, And):
        return 1 + contract_size(contract.contract_a) + contract_size(contract.contract_b)
    return 1
