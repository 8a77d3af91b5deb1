"""
Evaluator -- Step a contract forward to a date.

Responsibility:
    Given a contract and a reference date, separates the payments that are
    due at or before that date from the residual contract that describes
    everything still outstanding.

Architecture position:
    Domain -- pure functional core, zero I/O (logging only).
    Depends on finance_contracts.domain.contract for the grammar and the
    normalizing constructors used to rebuild residuals.

Invariants enforced:
    - Residuals are rebuilt through the smart constructors, so a residual
      is always in normal form and never larger than its input.
    - Payments keep declaration order: left before right in And.
    - A Later term that is not yet due is returned unchanged.

Failure modes:
    - IllegalContractError if a term outside the six variants is reached.
    - InvalidAmountError if scaling a payment overflows.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date
from typing import NamedTuple

from finance_contracts.domain.contract import (
    And,
    Contract,
    Give,
    Later,
    Multiple,
    One,
    Zero,
    and_,
    contract_size,
    give,
    multiple,
    zero,
)
from finance_contracts.domain.values import UNIT, Direction, Payment
from finance_contracts.exceptions import IllegalContractError
from finance_contracts.logging_config import get_logger

logger = get_logger("domain.evaluator")


class StepResult(NamedTuple):
    """Payments due now and the contract left over."""

    payments: tuple[Payment, ...]
    residual: Contract


def step(contract: Contract, as_of: date) -> StepResult:
    """
    Evaluate ``contract`` at ``as_of``.

    Preconditions:
        - ``contract`` was built with the smart constructors.

    Postconditions:
        - ``payments`` holds every payment due at or before ``as_of``.
        - ``residual`` holds every obligation not yet due.
        - ``contract`` is unchanged.

    Raises:
        IllegalContractError: If a term outside the grammar is reached.
    """
    result = _step(contract, as_of)
    logger.debug(
        "contract_stepped",
        extra={
            "as_of": as_of,
            "payment_count": len(result.payments),
            "residual_size": contract_size(result.residual),
        },
    )
    return result


def step_through(
    contract: Contract, dates: Iterable[date]
) -> Iterator[tuple[date, StepResult]]:
    """
    Step ``contract`` at each date in turn, feeding each residual forward.

    Yields (date, StepResult) pairs lazily.
    """
    residual = contract
    for as_of in dates:
        result = step(residual, as_of)
        residual = result.residual
        yield as_of, result


def _step(contract: Contract, as_of: date) -> StepResult:
    if isinstance(contract, Zero):
        return StepResult((), zero())

    if isinstance(contract, One):
        return StepResult((Payment(Direction.LONG, UNIT, contract.currency),), zero())

    if isinstance(contract, Multiple):
        payments, residual = _step(contract.contract, as_of)
        return StepResult(
            tuple(p.scaled(contract.amount) for p in payments),
            multiple(contract.amount, residual),
        )

    if isinstance(contract, Later):
        if as_of >= contract.date:
            return _step(contract.contract, as_of)
        return StepResult((), contract)

    if isinstance(contract, Give):
        payments, residual = _step(contract.contract, as_of)
        return StepResult(tuple(p.inverted() for p in payments), give(residual))

    if isinstance(contract, And):
        payments_a, residual_a = _step(contract.contract_a, as_of)
        payments_b, residual_b = _step(contract.contract_b, as_of)
        return StepResult(payments_a + payments_b, and_(residual_a, residual_b))

    term_type = type(contract).__name__
    logger.error("illegal_contract_variant", extra={"term_type": term_type})
    raise IllegalContractError(term_type)
