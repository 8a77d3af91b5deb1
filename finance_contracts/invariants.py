"""
Contract Invariants.

These invariants are structural law. They are enforced by the smart
constructors in finance_contracts.domain.contract and by the evaluator;
no configuration may switch them off.

This module exists solely to declare these invariants explicitly.
"""

from enum import Enum, unique


@unique
class ContractInvariant(str, Enum):
    """Guarantees that hold for every term built with the smart constructors."""

    FINITE_AMOUNTS = "finite_amounts"
    """Every Amount is a finite Decimal. Enforced by Amount.__post_init__
    and re-checked whenever a payment is scaled."""

    ZERO_ABSORPTION = "zero_absorption"
    """Multiple, Later and Give over Zero collapse to Zero; And drops a Zero
    child. Enforced by the smart constructors."""

    TRIVIAL_SCALING = "trivial_scaling"
    """multiple() by 0 or -0 is Zero and by 1 is the inner contract."""

    IMMUTABILITY = "immutability"
    """Contract terms and payments are frozen dataclasses. Stepping never
    mutates its input."""

    NON_GROWTH = "non_growth"
    """Stepping at non-decreasing dates never yields a residual with more
    nodes than its input. Enforced by rebuilding residuals through the
    smart constructors."""

    PAYMENT_ORDER = "payment_order"
    """And emits the left contract's payments before the right's."""


# All invariants as a frozenset for programmatic checks.
ALL_CONTRACT_INVARIANTS: frozenset[ContractInvariant] = frozenset(ContractInvariant)

# The domain package may not import from these modules.
# This is enforced by tests/architecture/test_domain_boundary.py.
FORBIDDEN_DOMAIN_IMPORTS: tuple[str, ...] = (
    "finance_contracts.config",
    "finance_contracts.serialization",
    "scripts",
    "yaml",
)
