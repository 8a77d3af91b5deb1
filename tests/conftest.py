"""
Pytest fixtures for the contract library test suite.

Provides:
- Structured logging configured for the whole session
- Log capture as parsed JSON dicts
- The two-bond portfolio used across evaluator, serialization and demo tests
"""

import json
import logging
from datetime import date
from io import StringIO

import pytest

from finance_contracts.domain.contract import Contract, and_, zcb
from finance_contracts.domain.values import Currency, make_amount
from finance_contracts.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)

CHRISTMAS_EVE = date(2020, 12, 24)
BOXING_DAY = date(2020, 12, 26)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG, stream=StringIO())
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture finance_contracts logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            step(contract, CHRISTMAS_EVE)
            logs = captured_logs()
            assert any(r["message"] == "contract_stepped" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("finance_contracts")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Contract fixtures
# =============================================================================


@pytest.fixture
def eur_bond() -> Contract:
    """100 EUR due on Christmas Eve 2020."""
    return zcb(CHRISTMAS_EVE, make_amount(100), Currency.EUR)


@pytest.fixture
def gbp_bond() -> Contract:
    """100 GBP due on Boxing Day 2020."""
    return zcb(BOXING_DAY, make_amount(100), Currency.GBP)


@pytest.fixture
def portfolio(eur_bond, gbp_bond) -> Contract:
    return and_(eur_bond, gbp_bond)
