"""Command-line interface for amortix.

Prints the amortization table of a loan request stored as JSON:

    amortix-schedule loan.json
    amortix-schedule loan.json --limit 12 --log-level DEBUG
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from amortix.core.request import LoanRequest
from amortix.engines import build_amortization_schedule
from amortix.exceptions import ConfigurationError, UnsupportedConventionError
from amortix.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_INVALID_INPUT = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amortix-schedule",
        description="Compute a loan amortization table from a JSON loan request.",
    )
    parser.add_argument("request", help="Path to a JSON loan request.")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only print the first N rows of the table.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to AMORTIX_LOG_LEVEL or WARNING).",
    )
    return parser


def main(args: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parsed = build_arg_parser().parse_args(args=args)
    if parsed.log_level:
        configure_logging(level=parsed.log_level)

    try:
        request = LoanRequest.from_json(parsed.request)
        schedule = build_amortization_schedule(request)
    except (ConfigurationError, UnsupportedConventionError) as e:
        logger.error("Cannot compute schedule: %s", e)
        return EXIT_INVALID_INPUT

    for key, value in schedule.summary().items():
        print(f"{key}: {value}")
    print()

    df = schedule.to_dataframe()
    if parsed.limit is not None:
        df = df.head(parsed.limit)
    print(df.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
