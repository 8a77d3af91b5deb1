"""
Finance Contracts - composable financial contract combinators.

Contracts are terms built from six primitives:
- Zero: no obligation
- One: receive one unit of a currency
- Multiple: scale a contract
- Later: defer a contract to a date
- Give: swap the side of every payment
- And: hold two contracts at once

step() evaluates a contract at a date and returns the payments due plus
the residual contract.
"""

from finance_contracts.domain import (
    Amount,
    Contract,
    Currency,
    Direction,
    Payment,
    StepResult,
    and_,
    give,
    later,
    make_amount,
    multiple,
    one,
    step,
    step_through,
    zcb,
    zero,
)
from finance_contracts.exceptions import (
    FinanceContractsError,
    IllegalContractError,
    InvalidAmountError,
    InvariantViolationError,
)

__version__ = "0.1.0"

__all__ = [
    "Amount",
    "Contract",
    "Currency",
    "Direction",
    "Payment",
    "StepResult",
    "and_",
    "give",
    "later",
    "make_amount",
    "multiple",
    "one",
    "step",
    "step_through",
    "zcb",
    "zero",
    "FinanceContractsError",
    "IllegalContractError",
    "InvalidAmountError",
    "InvariantViolationError",
]
