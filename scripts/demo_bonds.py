#!/usr/bin/env python3
"""
Two zero-coupon bonds, held together and stepped forward in time.

Builds 100 EUR due 2020-12-24 and 100 GBP due 2020-12-26, combines them
with and_(), steps the combination at each observation date and prints
the payments and the residual contract as JSON.

Usage:
    python3 scripts/demo_bonds.py
    python3 scripts/demo_bonds.py --as-of 2020-12-24 --as-of 2020-12-26
    python3 scripts/demo_bonds.py --config my_settings.yaml --log-level DEBUG
"""

import argparse
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import TextIO
from uuid import uuid4

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from finance_contracts import Contract, Currency, and_, make_amount, step_through, zcb  # noqa: E402
from finance_contracts.config import (  # noqa: E402
    DemoConfig,
    compute_checksum,
    load_config,
    parse_dates,
)
from finance_contracts.logging_config import (  # noqa: E402
    LogContext,
    configure_logging,
    get_logger,
)
from finance_contracts.serialization import contract_to_dict, payment_to_dict, to_json  # noqa: E402

logger = get_logger("demo.bonds")

EUR_MATURITY = date(2020, 12, 24)
GBP_MATURITY = date(2020, 12, 26)


def build_portfolio() -> Contract:
    """Both bonds held at once: EUR leg first, GBP leg second."""
    eur_bond = zcb(EUR_MATURITY, make_amount(100), Currency.EUR)
    gbp_bond = zcb(GBP_MATURITY, make_amount(100), Currency.GBP)
    return and_(eur_bond, gbp_bond)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Step a two-bond portfolio forward.")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument(
        "--as-of",
        action="append",
        type=date.fromisoformat,
        dest="as_of",
        metavar="YYYY-MM-DD",
        help="Observation date (repeatable, overrides the configured dates)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )
    return parser.parse_args(argv)


def run(config: DemoConfig, out: TextIO | None = None) -> list[dict]:
    """Step the portfolio at each configured date and print each result."""
    out = out or sys.stdout
    portfolio = build_portfolio()
    report: list[dict] = []

    for as_of, result in step_through(portfolio, config.as_of_dates):
        logger.info(
            "portfolio_stepped",
            extra={"as_of": as_of, "payment_count": len(result.payments)},
        )
        entry = {
            "as_of": as_of.isoformat(),
            "payments": [payment_to_dict(p) for p in result.payments],
            "residual": contract_to_dict(result.residual),
        }
        report.append(entry)
        print(f"# {as_of.isoformat()}", file=out)
        print(to_json(list(result.payments), indent=config.json_indent), file=out)
        print(to_json(result.residual, indent=config.json_indent), file=out)

    return report


def main(argv=None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)

    if args.as_of:
        try:
            dates = parse_dates(list(args.as_of))
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        config = replace(config, as_of_dates=dates)
    if args.log_level:
        config = replace(config, log_level=args.log_level)

    configure_logging(level=config.log_level_number)
    with LogContext.bind(portfolio_id=str(uuid4())):
        logger.info("demo_started", extra={"config_checksum": compute_checksum(config)})
        run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
