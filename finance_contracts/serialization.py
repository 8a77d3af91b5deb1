"""
Serialization -- Render payments and contracts as JSON.

Responsibility:
    Converts evaluation results into plain dicts and JSON text for display
    and logging. Amounts are rendered as decimal strings so no precision is
    lost to floats; dates use ISO 8601.

Architecture position:
    Outside the domain core. Consumes finance_contracts.domain types; the
    domain never imports this module.

Failure modes:
    - IllegalContractError when asked to render a term outside the grammar.
    - TypeError from json when handed an unsupported value.

Non-goals:
    - No parsing back from JSON.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from finance_contracts.domain.contract import (
    CONTRACT_TYPES,
    And,
    Contract,
    Give,
    Later,
    Multiple,
    One,
    Zero,
)
from finance_contracts.domain.evaluator import StepResult
from finance_contracts.domain.values import Payment
from finance_contracts.exceptions import IllegalContractError


def payment_to_dict(payment: Payment) -> dict[str, str]:
    return {
        "direction": payment.direction.value,
        "amount": str(payment.amount),
        "currency": payment.currency.value,
    }


def contract_to_dict(contract: Contract) -> dict[str, Any]:
    """Render a contract term, recursing into sub-contracts."""
    if isinstance(contract, Zero):
        return {"type": "Zero"}
    if isinstance(contract, One):
        return {"type": "One", "currency": contract.currency.value}
    if isinstance(contract, Multiple):
        return {
            "type": "Multiple",
            "amount": str(contract.amount),
            "contract": contract_to_dict(contract.contract),
        }
    if isinstance(contract, Later):
        return {
            "type": "Later",
            "date": contract.date.isoformat(),
            "contract": contract_to_dict(contract.contract),
        }
    if isinstance(contract, Give):
        return {"type": "Give", "contract": contract_to_dict(contract.contract)}
    if isinstance(contract, And):
        return {
            "type": "And",
            "contract_a": contract_to_dict(contract.contract_a),
            "contract_b": contract_to_dict(contract.contract_b),
        }
    raise IllegalContractError(type(contract).__name__)


def step_result_to_dict(result: StepResult) -> dict[str, Any]:
    return {
        "payments": [payment_to_dict(p) for p in result.payments],
        "residual": contract_to_dict(result.residual),
    }


def _to_plain(value: Any) -> Any:
    # StepResult is a tuple, so it must be checked before generic sequences
    if isinstance(value, StepResult):
        return step_result_to_dict(value)
    if isinstance(value, Payment):
        return payment_to_dict(value)
    if isinstance(value, CONTRACT_TYPES):
        return contract_to_dict(value)
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [_to_plain(v) for v in value]
    return value


def to_json(value: Any, indent: int | None = 2) -> str:
    """
    Render a payment, contract, StepResult or sequence of those as JSON.

    Args:
        value: The object to render.
        indent: Passed to json.dumps; None for a single line.

    Returns:
        JSON text.
    """
    return json.dumps(_to_plain(value), indent=indent)
