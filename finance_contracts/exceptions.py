"""
Typed Exception Hierarchy for the contract combinator library.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from FinanceContractsError:

    FinanceContractsError (base)
    |
    +-- InvalidAmountError
    |
    +-- InvariantViolationError
        +-- IllegalContractError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                  | When Raised
----------------|-----------------------|-----------------------------------------
Amount          | INVALID_AMOUNT        | Amount is NaN, infinite or unparseable,
                |                       | or a scaled payment overflows
----------------|-----------------------|-----------------------------------------
Invariant       | INVARIANT_VIOLATION   | Base for broken structural guarantees
                | ILLEGAL_CONTRACT      | Term outside the six contract variants
----------------|-----------------------|-----------------------------------------

===============================================================================
HANDLING PATTERNS
===============================================================================

Both kinds are programming-contract violations. They surface synchronously
to the caller and are fatal to the operation that raised them:

    try:
        amount = make_amount(raw)
    except InvalidAmountError as e:
        api_response(code=e.code, value=str(e.value))

IllegalContractError is unreachable for terms built with the smart
constructors in finance_contracts.domain.contract. Seeing one means a caller
handed the evaluator something that is not a contract term.
"""

from typing import Any


class FinanceContractsError(Exception):
    """
    Base exception for all contract library errors.

    All subclasses carry a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "FINANCE_CONTRACTS_ERROR"


class InvalidAmountError(FinanceContractsError):
    """Amount is not a finite number."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Illegal amount: '{value}'")


class InvariantViolationError(FinanceContractsError):
    """Base exception for broken structural guarantees."""

    code: str = "INVARIANT_VIOLATION"


class IllegalContractError(InvariantViolationError):
    """
    Term is not one of the six contract variants.

    Raised by the evaluator and the serializer. The smart constructors
    never produce such a term.
    """

    code: str = "ILLEGAL_CONTRACT"

    def __init__(self, term_type: str):
        self.term_type = term_type
        super().__init__(f"Illegal Contract type: {term_type}")
