"""
Contract domain: value types, the contract grammar and the evaluator.

Pure functional core. Nothing in this package performs I/O, reads the
clock or consults configuration.
"""

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
    is_zero,
    later,
    multiple,
    one,
    zcb,
    zero,
)
from finance_contracts.domain.evaluator import StepResult, step, step_through
from finance_contracts.domain.values import (
    Amount,
    Currency,
    Direction,
    Payment,
    make_amount,
)

__all__ = [
    # Values
    "Amount",
    "Currency",
    "Direction",
    "Payment",
    "make_amount",
    # Grammar
    "Contract",
    "Zero",
    "One",
    "Multiple",
    "Later",
    "Give",
    "And",
    # Smart constructors
    "zero",
    "one",
    "multiple",
    "later",
    "give",
    "and_",
    "zcb",
    "is_zero",
    "contract_size",
    # Evaluation
    "StepResult",
    "step",
    "step_through",
]
