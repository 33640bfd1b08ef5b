"""Interactive command-line driver."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from legacy_calculator import __version__
from legacy_calculator.core import SUPPORTED_OPERATORS, calculate
from legacy_calculator.scanner import InputScanner
from legacy_calculator.utils import format_result

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

BANNER = "=== Legacy C Calculator ==="
FIRST_NUMBER_PROMPT = "Enter first number: "
OPERATION_PROMPT = f"Enter operation ({', '.join(SUPPORTED_OPERATORS)}): "
SECOND_NUMBER_PROMPT = "Enter second number: "
INVALID_OPERATION_MESSAGE = "Invalid operation!"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _prompt(stdout: TextIO, text: str) -> None:
    stdout.write(text)
    stdout.flush()


def _report_error(stdout: TextIO, message: str) -> int:
    print(f"Error: {message}", file=stdout)
    return EXIT_FAILURE


def run(stdin: TextIO, stdout: TextIO) -> int:
    """
    Run one calculation against the given streams.

    Reads the first operand, the operator and the second operand in that
    order, then prints either the result or an error message.

    Args:
        stdin: Stream the operands and operator are read from
        stdout: Stream prompts and results are written to

    Returns:
        0 on success, 1 on division by zero, an unsupported operator or
        input that cannot be read
    """
    scanner = InputScanner(stdin)
    print(BANNER, file=stdout)

    _prompt(stdout, FIRST_NUMBER_PROMPT)
    first = scanner.read_number()
    if not first.ok:
        logger.info("Could not read first operand: %s", first.error)
        return _report_error(stdout, first.error)

    _prompt(stdout, OPERATION_PROMPT)
    operator = scanner.read_operator()
    if not operator.ok:
        logger.info("Could not read operator: %s", operator.error)
        return _report_error(stdout, operator.error)

    _prompt(stdout, SECOND_NUMBER_PROMPT)
    second = scanner.read_number()
    if not second.ok:
        logger.info("Could not read second operand: %s", second.error)
        return _report_error(stdout, second.error)

    logger.debug("Calculating %r %s %r", first.value, operator.value, second.value)
    outcome = calculate(first.value, operator.value, second.value)

    if outcome is None:
        logger.info("Unsupported operator %r", operator.value)
        print(INVALID_OPERATION_MESSAGE, file=stdout)
        return EXIT_FAILURE

    if not outcome.ok:
        logger.info("Calculation failed: %s", outcome.error_message)
        return _report_error(stdout, outcome.error_message)

    print(format_result(outcome.result), file=stdout)
    return EXIT_SUCCESS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="legacy-calculator",
        description="Interactive two-operand calculator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
