"""Command line interface for the radix formatter."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from ..domain.models import FormatJob, FormatOptions, IntKind, results_as_lines
from ..parser.job_loader import load_job, run_job
from ..parsing import parse_radix
from ..utils.constants import (
    BINARY_PREFIX,
    BINARY_RADIX,
    HEX_PREFIX,
    HEX_RADIX,
    JOB_SCHEMA_PATH,
)
from ..utils.errors import FormatError, JobError
from ..utils.logging import configure_logger, get_logger

LOG = get_logger()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _integer_literal(token: str) -> int:
    try:
        return int(token, 0)
    except ValueError as exc:
        raise SystemExit(f"intradix: not an integer literal: {token!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intradix",
        description="Format integers in an arbitrary radix (2-36 with the default alphabet)",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Integer literals to format (255, 0xff, -0b101), or digit strings with --parse",
    )
    parser.add_argument("--job", "-j", type=Path, help="Path to a JSON job file")
    parser.add_argument(
        "--schema",
        "-sc",
        type=Path,
        default=JOB_SCHEMA_PATH,
        help="Path to the job JSON schema (default: bundled job_schema.json)",
    )
    parser.add_argument("--radix", "-r", type=int, help="Target radix (default: 10)")
    parser.add_argument("--digits", "-d", help="Digit alphabet (default: 0-9a-z)")
    parser.add_argument("--prefix", "-p", help="Literal inserted after the sign and before the digits")
    shortcut = parser.add_mutually_exclusive_group()
    shortcut.add_argument("--binary", "-b", action="store_true", help="Shortcut for --radix 2 --prefix 0b")
    shortcut.add_argument("--hex", "-x", action="store_true", help="Shortcut for --radix 16 --prefix 0x")
    parser.add_argument(
        "--width",
        "-w",
        choices=[kind.value for kind in IntKind],
        help="Treat each value as a fixed-width integer of this kind",
    )
    parser.add_argument(
        "--parse",
        action="store_true",
        help="Parse each VALUE as text in the configured radix and print it in decimal",
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    parser.add_argument("--no-console-log", "-nl", action="store_true", help="Disable console logging")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _resolve_options(args: argparse.Namespace, base: FormatOptions) -> FormatOptions:
    """Layer CLI flags over ``base``; explicit flags always win."""

    options = base
    if args.binary:
        options = replace(options, radix=BINARY_RADIX, prefix=BINARY_PREFIX)
    elif args.hex:
        options = replace(options, radix=HEX_RADIX, prefix=HEX_PREFIX)
    if args.radix is not None:
        options = replace(options, radix=args.radix)
    if args.digits is not None:
        options = replace(options, digits=args.digits)
    if args.prefix is not None:
        options = replace(options, prefix=args.prefix)
    return options


def _resolve_job(args: argparse.Namespace) -> FormatJob:
    if args.job is not None:
        job = load_job(args.job, args.schema)
        if args.values:
            job = replace(job, values=job.values + tuple(_integer_literal(v) for v in args.values))
    else:
        if not args.values:
            raise SystemExit("intradix: provide at least one VALUE or --job")
        job = FormatJob(values=tuple(_integer_literal(v) for v in args.values))
    options = _resolve_options(args, job.options)
    width = IntKind.from_string(args.width) if args.width is not None else job.width
    return replace(job, options=options, width=width)


def _run_parse(args: argparse.Namespace) -> List[str]:
    if args.job is not None:
        raise SystemExit("intradix: --parse cannot be combined with --job")
    if args.width is not None:
        raise SystemExit("intradix: --parse cannot be combined with --width")
    if not args.values:
        raise SystemExit("intradix: --parse requires at least one VALUE")
    options = _resolve_options(args, FormatOptions())
    LOG.debug("parsing %d value(s) with %s", len(args.values), options)
    return [str(parse_radix(text, options.radix, options.digits, options.prefix)) for text in args.values]


def _run_with_args(args: argparse.Namespace) -> int:
    configure_logger(args.log_file, console=not args.no_console_log, level=getattr(logging, args.log_level))
    try:
        if args.parse:
            lines = _run_parse(args)
        else:
            job = _resolve_job(args)
            LOG.debug("formatting %d value(s) with %s", len(job.values), job.options)
            lines = results_as_lines(run_job(job))
    except (FormatError, JobError, TypeError, OverflowError) as exc:
        LOG.error("%s: %s", type(exc).__name__, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    for line in lines:
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    return _run_with_args(args)


if __name__ == "__main__":
    raise SystemExit(main())
