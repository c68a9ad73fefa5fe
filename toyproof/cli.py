"""
Command-line entry point.

With no arguments this performs the reference run (secret 59, 10
trials of the u64 protocol) and prints a single line to stdout.
Diagnostics go to stderr through ``logging``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .runner import (
    DEFAULT_ITERATIONS,
    DEFAULT_SECRET,
    PROTOCOLS,
    TrialConfig,
    simulate,
)

LOGGER_NAME = "toyproof"


def set_logger_config(verbosity: int) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logging_level = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}.get(
        min(max(0, verbosity), 2), logging.WARNING
    )
    logger.setLevel(logging_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter("[toyproof %(asctime)s ~ %(levelname)s]: %(message)s")
    )
    console_handler.setLevel(logging_level)
    logger.addHandler(console_handler)


def generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toyproof",
        description="Estimate the success probability of a toy "
        "commitment/challenge/response proof.",
    )
    parser.add_argument(
        "-n", "--iterations", type=int, default=DEFAULT_ITERATIONS,
        help="number of trials (default: %(default)s)",
    )
    parser.add_argument(
        "--secret", type=int, default=DEFAULT_SECRET,
        help="prover's u64 secret (default: %(default)s)",
    )
    parser.add_argument(
        "-s", "--seed", metavar="SEED_NUM", type=int,
        help="seed for challenge randomness",
    )
    parser.add_argument(
        "-p", "--protocol", choices=PROTOCOLS, default="u64",
        help="protocol to run (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", dest="verbosity", action="count", default=0,
        help="log to stderr; repeat for more detail (-v info, -vv debug)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = generate_parser()
    args = parser.parse_args(argv)
    set_logger_config(args.verbosity)

    try:
        config = TrialConfig(
            secret=args.secret,
            iterations=args.iterations,
            seed=args.seed,
            protocol=args.protocol,
        )
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    report = simulate(config, record=False)
    print(report.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
