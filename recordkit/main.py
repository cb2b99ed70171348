"""
Command-line entry point.

    recordkit [program] [--data-dir DIR] [--log-level LEVEL]

Without a program name a menu of all programs is shown.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from .config import settings
from .programs import PROGRAMS, LineReader, ProgramContext, run_menu


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recordkit", description="Small menu-driven record keeping programs.")
    parser.add_argument("program", nargs="?", choices=sorted(PROGRAMS),
                        help="program to run (default: choose from a menu)")
    parser.add_argument("--data-dir", default=settings.DATA_DIR,
                        help="directory holding the data files (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        help="logging level (default: %(default)s)")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None, stdin=None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    console = console or Console()
    ctx = ProgramContext(
        reader=LineReader(stdin if stdin is not None else sys.stdin, console),
        console=console,
        data_dir=Path(args.data_dir),
    )
    ctx.data_dir.mkdir(parents=True, exist_ok=True)

    if args.program:
        PROGRAMS[args.program][0](ctx)
        return 0

    names = list(PROGRAMS)
    actions = [(PROGRAMS[name][1], (lambda run=PROGRAMS[name][0]: run(ctx))) for name in names]
    run_menu(ctx, "recordkit", actions, "Quit")
    return 0


if __name__ == "__main__":
    sys.exit(main())
