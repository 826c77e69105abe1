"""Command-line interface for mathgreet."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from arith.ops import ArithmeticOverflowError, add, uses_add
from greeting.greeter import Greeter
from logging_setup import setup_logging
from settings.config import ConfigError, MathGreetConfig, load_config

logger = logging.getLogger(__name__)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Directory containing mathgreet.toml (default: .)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Enable verbose output (sets logging level to DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        dest="log_level",
        default=None,
        help="Logging level (default: config log_level)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mathgreet")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add two 32-bit integers")
    _add_common_options(add_parser)
    add_parser.add_argument("a", type=int, help="Left operand")
    add_parser.add_argument("b", type=int, help="Right operand")
    add_parser.add_argument(
        "--overflow",
        choices=["wrap", "raise"],
        default=None,
        help="Overflow behaviour (default: config overflow)",
    )

    uses_add_parser = subparsers.add_parser("uses-add", help="Print add(10, 20)")
    _add_common_options(uses_add_parser)

    greet_parser = subparsers.add_parser("greet", help="Print a greeting")
    _add_common_options(greet_parser)
    greet_parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Name to greet (default: config default_name)",
    )

    return parser


def _handle_add(
    config: MathGreetConfig, a: int, b: int, overflow: str | None
) -> int:
    mode = overflow if overflow is not None else config.overflow
    try:
        result = add(a, b, overflow=mode)
    except (ArithmeticOverflowError, ValueError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    sys.stdout.write(f"{result}\n")
    return 0


def _handle_uses_add() -> int:
    sys.stdout.write(f"{uses_add()}\n")
    return 0


def _handle_greet(config: MathGreetConfig, name: str | None) -> int:
    greeter = Greeter(name=name if name is not None else config.default_name)
    sys.stdout.write(f"{greeter.greet()}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    root = Path(args.root).expanduser().resolve()
    try:
        config = load_config(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    log_level = args.log_level if args.log_level is not None else config.log_level
    overflow = getattr(args, "overflow", None) or config.overflow
    setup_logging(log_level)
    logger.debug(
        "command=%s root=%s overflow=%s log_level=%s",
        args.command,
        root,
        overflow,
        log_level,
    )

    if args.command == "add":
        return _handle_add(config, args.a, args.b, args.overflow)

    if args.command == "uses-add":
        return _handle_uses_add()

    if args.command == "greet":
        return _handle_greet(config, args.name)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
