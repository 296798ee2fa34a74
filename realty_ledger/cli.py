"""Command-line entry point: build a portfolio and print its summary.

Usage::

    realty-ledger                     # reference portfolio
    realty-ledger --sample 10 --seed 42
"""

from __future__ import annotations

import argparse
from decimal import Decimal

from realty_ledger.config import LedgerConfig
from realty_ledger.exceptions import LedgerError
from realty_ledger.generators import PropertyGenerator
from realty_ledger.logging import FORMAT_TYPES, get_logger, log_fields, setup_logging
from realty_ledger.sinks import ConsoleSink
from realty_ledger.store import PortfolioLedger

logger = get_logger(__name__)


def build_reference_portfolio() -> PortfolioLedger:
    """Single-property portfolio with one income and one expense entry."""
    ledger = PortfolioLedger()
    pid = ledger.add_property(
        "123 Main St",
        "Anytown",
        Decimal("200000.00"),
        Decimal("15000.00"),
        Decimal("220000.00"),
        Decimal("1500.00"),
        "Active",
    )
    ledger.record_income(pid, "2024-03-01", "Laundry", Decimal("1000.00"))
    ledger.record_expense(pid, "2024-03-15", "Repairs", Decimal("200.00"))
    return ledger


def build_sample_portfolio(count: int, seed: int | None, locale: str) -> PortfolioLedger:
    """Generated portfolio with a year of activity per property."""
    ledger = PortfolioLedger()
    generator = PropertyGenerator(seed=seed, locale=locale)
    for pid in generator.populate(ledger, count):
        generator.generate_activity(ledger, pid)
    return ledger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments, defaulting from the environment."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Print a real-estate portfolio summary")
    parser.add_argument(
        "--sample",
        type=int,
        nargs="?",
        const=config.generator.num_properties,
        metavar="N",
        help="Generate N synthetic properties (default N from LEDGER_SAMPLE_SIZE) "
        "instead of the reference portfolio",
    )
    parser.add_argument("--seed", type=int, default=config.generator.seed, help="Random seed")
    parser.add_argument("--locale", default=config.generator.locale, help="Faker locale")
    parser.add_argument("--log-level", default=config.log_level, help="Log level")
    parser.add_argument("--log-format", default=config.log_format, choices=FORMAT_TYPES)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    try:
        args = parse_args(argv)
    except LedgerError as exc:
        print(f"Configuration error: {exc}")
        return 2

    setup_logging(args.log_level, args.log_format)

    if args.sample is not None:
        if args.sample < 0:
            logger.error("--sample must not be negative")
            return 2
        ledger = build_sample_portfolio(args.sample, args.seed, args.locale)
    else:
        ledger = build_reference_portfolio()

    sink = ConsoleSink()
    sink.write_summary(ledger)
    logger.info(
        "Printed portfolio summary",
        extra=log_fields(lines=sink.lines_written, **ledger.summary()),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
