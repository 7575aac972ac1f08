"""Command line entry point: check the questions, then optionally serve the site."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

from .errors import QuizError
from .render import render_all
from .serve import serve


def _version() -> str:
    try:
        return version("quizbuild")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(prog="quizbuild", description="Quiz site builder")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("serve", help="Serve website over http at localhost:8000")
    return parser


def report(error: BaseException | None) -> None | NoReturn:
    """Print an error to stderr and exit with status 1; do nothing for None."""
    if error is None:
        return None
    if sys.stderr.isatty():
        print(f"\x1b[1;31mERROR\x1b[0;1m: {error}\x1b[0m", file=sys.stderr)
    else:
        print(f"ERROR: {error}", file=sys.stderr)
    raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        render_all(Path("."))
    except (QuizError, OSError) as exc:
        report(exc)

    if args.command == "serve":
        print(file=sys.stderr)
        try:
            serve()
        except OSError as exc:
            report(exc)


if __name__ == "__main__":
    main()