"""Command line calculator for BigDecimal values.

Usage:
    bigdecimal parse 1234.5678E-17
    bigdecimal calc 1.5 '*' 2.25
    bigdecimal sqrt 2 --log-level debug

Configuration via environment variables:
- BIGDECIMAL_LOG_LEVEL: Default for --log-level (default: warning)
- BIGDECIMAL_LOG_JSON: Default for --json-logs (default: false)
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

import structlog

from bigdecimal.config import LogConfig, configure_logging
from bigdecimal.errors import BigDecimalError
from bigdecimal.formatting import format_magnitude
from bigdecimal.roots import sqrt
from bigdecimal.value import BigDecimal

logger = structlog.get_logger()

OPERATORS: dict[str, Callable[[BigDecimal, BigDecimal], BigDecimal]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "%": lambda a, b: a % b,
}


def build_parser(env_config: LogConfig | None = None) -> argparse.ArgumentParser:
    """Build the argument parser, taking logging defaults from env_config."""
    env_config = env_config or LogConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="bigdecimal",
        description="Arbitrary-precision decimal calculator",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error", "critical"],
        default=env_config.level,
        help=f"Minimum log level (default: {env_config.level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=env_config.json,
        help="Render log events as JSON",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Show the canonical form, magnitude and scale")
    parse_cmd.add_argument("text", help="Number to parse, e.g. 1234.5678E-17")

    calc_cmd = commands.add_parser("calc", help="Apply a binary operator")
    calc_cmd.add_argument("left", help="Left operand")
    calc_cmd.add_argument("operator", choices=sorted(OPERATORS), help="Operator")
    calc_cmd.add_argument("right", help="Right operand")

    sqrt_cmd = commands.add_parser("sqrt", help="Approximate a square root")
    sqrt_cmd.add_argument("value", help="Number to take the root of")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its output text.

    Raises:
        BigDecimalError: If an operand is invalid or the operation fails
    """
    if args.command == "parse":
        value = BigDecimal.parse(args.text)
        return f"{value}\nmagnitude: {format_magnitude(value.magnitude)}\nscale: {value.scale}"

    if args.command == "calc":
        left = BigDecimal.parse(args.left)
        right = BigDecimal.parse(args.right)
        logger.debug("calc", left=str(left), operator=args.operator, right=str(right))
        return str(OPERATORS[args.operator](left, right))

    return str(sqrt(BigDecimal.parse(args.value)))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the bigdecimal console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(LogConfig(level=args.log_level, json=args.json_logs))

    try:
        output = run(args)
    except BigDecimalError as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0
